"""
Mentor Matching Constants

Defines the focus-area table, score weights, rating bands and reason strings
used by the matching engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, TypedDict


# =============================================================================
# ENUMS
# =============================================================================

class PrimaryFocusArea(str, Enum):
    """Areas an applicant is currently focused on."""
    SCHOOL_SEARCH = "school_search"
    GPA_PREREQS = "gpa_prereqs"
    CERTIFICATIONS = "certifications"    # CCRN, BLS, ACLS, etc.
    SHADOWING = "shadowing"
    LEADERSHIP = "leadership"
    RESUME = "resume"
    ESSAY = "essay"                      # Personal statement
    INTERVIEW_PREP = "interview_prep"


class FocusAreaStatus(str, Enum):
    ACTIVE = "active"
    SECONDARY = "secondary"
    COMPLETED = "completed"


class IcuType(str, Enum):
    """ICU backgrounds for applicants and mentors."""
    MICU = "micu"
    SICU = "sicu"
    CVICU = "cvicu"
    CTICU = "cticu"
    NEURO_ICU = "neuro_icu"
    TRAUMA_ICU = "trauma_icu"
    BURN_ICU = "burn_icu"
    PICU = "picu"
    NICU = "nicu"
    MIXED = "mixed"
    FLIGHT_NURSE = "flight_nurse"
    OTHER = "other"


class ProviderStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"


class MatchContext(str, Enum):
    """Where the recommendations are displayed."""
    GENERAL = "general"
    PROGRAMS = "programs"
    SCHOOL = "school"
    DASHBOARD = "dashboard"


# Service types a mentor can offer
class ServiceType:
    MOCK_INTERVIEW = "mock_interview"
    ESSAY_REVIEW = "essay_review"
    STRATEGY_SESSION = "strategy_session"
    SCHOOL_QA = "school_qa"
    RESUME_REVIEW = "resume_review"


# =============================================================================
# FOCUS AREA TABLE
# =============================================================================

class FocusAreaProfile(TypedDict):
    services: List[str]
    label: Optional[str]


# Single table for both scoring (services) and reason labels
FOCUS_AREA_PROFILES: Dict[str, FocusAreaProfile] = {
    PrimaryFocusArea.ESSAY.value: {
        "services": [ServiceType.ESSAY_REVIEW],
        "label": "Essay expert",
    },
    PrimaryFocusArea.RESUME.value: {
        "services": [ServiceType.RESUME_REVIEW],
        "label": "Resume specialist",
    },
    PrimaryFocusArea.INTERVIEW_PREP.value: {
        "services": [ServiceType.MOCK_INTERVIEW],
        "label": "Interview coach",
    },
    PrimaryFocusArea.SCHOOL_SEARCH.value: {
        "services": [ServiceType.STRATEGY_SESSION, ServiceType.SCHOOL_QA],
        "label": "School advisor",
    },
    PrimaryFocusArea.GPA_PREREQS.value: {
        "services": [ServiceType.STRATEGY_SESSION],
        "label": None,
    },
    PrimaryFocusArea.CERTIFICATIONS.value: {
        "services": [ServiceType.STRATEGY_SESSION],
        "label": None,
    },
    PrimaryFocusArea.SHADOWING.value: {
        "services": [ServiceType.STRATEGY_SESSION, ServiceType.SCHOOL_QA],
        "label": None,
    },
    PrimaryFocusArea.LEADERSHIP.value: {
        "services": [ServiceType.RESUME_REVIEW, ServiceType.STRATEGY_SESSION],
        "label": None,
    },
}

# =============================================================================
# SCORE WEIGHTS
# =============================================================================

FOCUS_MATCH_POINTS = 40
AVAILABLE_THIS_WEEK_POINTS = 20
ICU_MATCH_POINTS = 15
TARGET_PROGRAM_POINTS = 25

# Next open slot proximity: (max days away, points), checked in order
SLOT_PROXIMITY_BANDS: List[Tuple[int, int]] = [
    (3, 10),
    (7, 5),
]

# Rating step function: (minimum rating, points), first match wins
RATING_BANDS: List[Tuple[float, int]] = [
    (4.9, 20),
    (4.7, 15),
    (4.5, 10),
    (4.0, 5),
]

# Context-specific bonuses
PROGRAMS_CONTEXT_BONUS = 10
DASHBOARD_CONTEXT_BONUS = 5
DASHBOARD_MIN_BOOKINGS = 20

# =============================================================================
# REASONS
# =============================================================================

REASON_AVAILABLE = "Available this week"
REASON_TARGET_SCHOOL = "At your target school"
REASON_QUICK_RESPONDER = "Quick responder"
REASON_TOP_RATED_FALLBACK = "Top rated mentor"
REASON_HIGHLY_RATED_FALLBACK = "Highly rated mentor"

REASON_MIN_RATING = 4.8
QUICK_RESPONSE_MINUTES = 180
MAX_REASONS = 2

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_LIMIT = 3
DEFAULT_CONTEXT = MatchContext.GENERAL.value
