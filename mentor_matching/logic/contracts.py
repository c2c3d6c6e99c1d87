"""
Data Contracts for the Mentor Matching Engine

Defines Pydantic models for User and Provider (input) and MatchResult (output).
These contracts are the API boundary for the matching engine. Every nested
field is optional because records come from a loosely typed upstream source.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .constants import DEFAULT_CONTEXT, DEFAULT_LIMIT, FocusAreaStatus, ProviderStatus


class CamelModel(BaseModel):
    """Accepts the front-end's camelCase keys as well as snake_case names."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class FocusAreaEntry(CamelModel):
    area: Optional[str] = None
    status: Optional[str] = None


class GuidanceState(CamelModel):
    primary_focus_areas: Optional[List[FocusAreaEntry]] = None


class ClinicalProfile(CamelModel):
    primary_icu_type: Optional[str] = None


class ProgramRef(CamelModel):
    name: Optional[str] = None


class TargetProgram(CamelModel):
    program: Optional[ProgramRef] = None


class User(CamelModel):
    """
    Applicant record as seen by the matching engine.
    """
    guidance_state: Optional[GuidanceState] = None
    clinical_profile: Optional[ClinicalProfile] = None
    target_programs: Optional[List[TargetProgram]] = None

    def active_focus_area(self) -> Optional[str]:
        """Area of the first focus entry marked active, if any."""
        if not self.guidance_state or not self.guidance_state.primary_focus_areas:
            return None
        for entry in self.guidance_state.primary_focus_areas:
            if entry.status == FocusAreaStatus.ACTIVE.value:
                return entry.area
        return None

    def icu_type(self) -> Optional[str]:
        if not self.clinical_profile:
            return None
        return self.clinical_profile.primary_icu_type

    def target_program_names(self) -> List[str]:
        """Lower-cased target program names, blanks dropped."""
        names = []
        for target in self.target_programs or []:
            if target.program and target.program.name:
                names.append(target.program.name.lower())
        return names


class Provider(CamelModel):
    """
    Mentor record. Unknown fields (id, name, avatarUrl, ...) are kept so the
    caller gets its own record back inside each MatchResult.
    """
    status: Optional[str] = None
    is_paused: Optional[bool] = None
    available_this_week: Optional[bool] = None
    next_available_slot: Optional[datetime] = None
    rating: Optional[float] = None
    previous_icu_type: Optional[str] = None
    program: Optional[str] = None
    program_name: Optional[str] = None
    specializations: Optional[List[str]] = None
    total_bookings: Optional[float] = None
    response_time_minutes: Optional[float] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"

    @property
    def is_approved(self) -> bool:
        return self.status == ProviderStatus.APPROVED.value

    @property
    def is_bookable(self) -> bool:
        return bool(self.available_this_week) and not self.is_paused

    def program_key(self) -> Optional[str]:
        """Lower-cased affiliated school, `program` first then `programName`."""
        return (self.program or "").lower() or (self.program_name or "").lower() or None


class MatchOptions(CamelModel):
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    context: str = DEFAULT_CONTEXT


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class MatchResult(CamelModel):
    """
    Single recommended mentor. Built fresh per request.
    """
    provider: Provider
    score: int = Field(default=0, ge=0)
    reasons: List[str] = Field(default_factory=list)
