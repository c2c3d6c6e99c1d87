"""
Mentor Matching Logic Module

Provides the deterministic scoring engine for mentor recommendations.
"""

from .contracts import (
    User,
    Provider,
    MatchOptions,
    MatchResult,
    FocusAreaEntry,
    GuidanceState,
    ClinicalProfile,
    TargetProgram,
    ProgramRef,
)
from .selector import get_recommended_mentors, has_available_mentors, eligible_providers
from .scorer import calculate_match_score, score_breakdown
from .explainer import get_match_reasons
from .constants import (
    PrimaryFocusArea,
    FocusAreaStatus,
    IcuType,
    ProviderStatus,
    MatchContext,
    ServiceType,
)

__all__ = [
    # Main entry points
    "get_recommended_mentors",
    "has_available_mentors",
    "eligible_providers",
    "calculate_match_score",
    "score_breakdown",
    "get_match_reasons",

    # Contracts
    "User",
    "Provider",
    "MatchOptions",
    "MatchResult",
    "FocusAreaEntry",
    "GuidanceState",
    "ClinicalProfile",
    "TargetProgram",
    "ProgramRef",

    # Enums
    "PrimaryFocusArea",
    "FocusAreaStatus",
    "IcuType",
    "ProviderStatus",
    "MatchContext",
    "ServiceType",
]
