"""
Mentor Matching API Routes

Exposes the matching engine via REST API.
Main endpoint: POST /recommendations
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.orm import Session

from db import get_db
from . import ENGINE_VERSION
from .logic.contracts import User, Provider, MatchOptions
from .logic.selector import get_recommended_mentors, has_available_mentors
from .logic.adapter import fetch_providers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint. Shapes are validated by the handler."""
    user: Any = Field(
        default=None,
        description="Applicant with guidanceState, clinicalProfile, targetPrograms",
        examples=[{
            "clinicalProfile": {"primaryIcuType": "cvicu"},
            "guidanceState": {"primaryFocusAreas": [{"area": "essay", "status": "active"}]},
            "targetPrograms": [{"program": {"name": "Duke University"}}],
        }],
    )
    providers: Any = Field(
        default=None,
        description="Candidate mentors. Omit to load approved mentors from the database",
    )
    options: Any = Field(
        default=None,
        description="{limit, context}",
    )


class AvailabilityRequest(BaseModel):
    providers: Any = None


# =============================================================================
# HELPERS
# =============================================================================

def _parse_user(raw: Any) -> User:
    if not isinstance(raw, dict):
        raise HTTPException(status_code=400, detail="Invalid user: expected an object")
    try:
        return User.model_validate(raw)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid user: {e}")


def _parse_providers(raw: Any) -> List[Provider]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(p, dict) for p in raw):
        raise HTTPException(status_code=400, detail="Invalid providers: expected an array of objects")
    try:
        return [Provider.model_validate(p) for p in raw]
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid providers: {e}")


def _parse_options(raw: Any) -> MatchOptions:
    if raw is None:
        return MatchOptions()
    if not isinstance(raw, dict):
        raise HTTPException(status_code=400, detail="Invalid options: expected an object")
    try:
        return MatchOptions.model_validate(raw)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid options: {e}")


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get recommended mentors")
@router.post("/", summary="Get recommended mentors", include_in_schema=False)
def recommend_mentors(
    request: RecommendationRequest,
    db_session=Depends(get_db)
) -> List[Dict[str, Any]]:
    """
    Rank mentors for an applicant.

    **Request Body:**
    - `user`: Applicant's guidance state, clinical profile and target programs
    - `providers`: Candidate mentors; omitted means load approved mentors from the database
    - `options`: `limit` (default 3) and `context` (general, programs, school, dashboard)

    **Response:**
    - List of `{provider, score, reasons}`, best match first
    """
    user = _parse_user(request.user)
    options = _parse_options(request.options)

    if "providers" in request.model_fields_set:
        providers = _parse_providers(request.providers)
    else:
        db: Session
        with db_session as db:
            providers = fetch_providers(db)

    results = get_recommended_mentors(user, providers, options)
    return [r.model_dump(mode="json", by_alias=True) for r in results]


@router.post("/available", summary="Check whether any mentor can be shown")
def mentors_available(request: AvailabilityRequest) -> Dict[str, bool]:
    providers = _parse_providers(request.providers)
    return {"available": has_available_mentors(providers)}


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Matching engine health check")
def health_check():
    """Check if matching engine is operational."""
    return {"status": "ok", "engine": "mentor_matching", "version": ENGINE_VERSION}
