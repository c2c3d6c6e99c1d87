"""
Match Scorer

Individual scoring functions for each matching criterion.
Each scorer returns integer points; the overall match score is their sum.
Missing data on either side means the criterion contributes 0, never an error.
"""

import math
from datetime import datetime, timezone
from typing import Dict, Optional

from .contracts import User, Provider
from .constants import (
    FOCUS_AREA_PROFILES,
    FOCUS_MATCH_POINTS,
    AVAILABLE_THIS_WEEK_POINTS,
    SLOT_PROXIMITY_BANDS,
    RATING_BANDS,
    ICU_MATCH_POINTS,
    TARGET_PROGRAM_POINTS,
    PROGRAMS_CONTEXT_BONUS,
    DASHBOARD_CONTEXT_BONUS,
    DASHBOARD_MIN_BOOKINGS,
    DEFAULT_CONTEXT,
    MatchContext,
    ServiceType,
)

SECONDS_PER_DAY = 24 * 60 * 60


def provider_offers_focus(user: User, provider: Provider) -> bool:
    """
    True if any specialization overlaps a service mapped to the user's
    active focus area. Overlap is a substring check in either direction.
    """
    focus = user.active_focus_area()
    if not focus or focus not in FOCUS_AREA_PROFILES:
        return False

    needed = FOCUS_AREA_PROFILES[focus]["services"]
    return any(
        spec in service or service in spec
        for spec in provider.specializations or []
        for service in needed
    )


def icu_matches(user: User, provider: Provider) -> bool:
    icu_type = user.icu_type()
    return bool(icu_type) and provider.previous_icu_type == icu_type


def program_matches(user: User, provider: Provider) -> bool:
    """True if the mentor's school contains one of the user's target program names."""
    provider_program = provider.program_key()
    if not provider_program:
        return False
    return any(target in provider_program for target in user.target_program_names())


def days_until(slot: datetime, now: datetime) -> int:
    """Whole days between two instants, rounded half up. Naive datetimes are UTC."""
    if slot.tzinfo is None:
        slot = slot.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    days = abs((slot - now).total_seconds()) / SECONDS_PER_DAY
    return math.floor(days + 0.5)


# =============================================================================
# CRITERION SCORERS
# =============================================================================

def score_focus_match(user: User, provider: Provider) -> int:
    return FOCUS_MATCH_POINTS if provider_offers_focus(user, provider) else 0


def score_availability(provider: Provider, now: datetime) -> int:
    """
    Bookable this week plus proximity of the next open slot.
    The two parts are independent.
    """
    points = 0
    if provider.is_bookable:
        points += AVAILABLE_THIS_WEEK_POINTS

    if provider.next_available_slot:
        days = days_until(provider.next_available_slot, now)
        for max_days, slot_points in SLOT_PROXIMITY_BANDS:
            if days <= max_days:
                points += slot_points
                break
    return points


def score_rating(provider: Provider) -> int:
    if provider.rating is None:
        return 0
    for threshold, points in RATING_BANDS:
        if provider.rating >= threshold:
            return points
    return 0


def score_icu_match(user: User, provider: Provider) -> int:
    return ICU_MATCH_POINTS if icu_matches(user, provider) else 0


def score_program_match(user: User, provider: Provider) -> int:
    return TARGET_PROGRAM_POINTS if program_matches(user, provider) else 0


def score_context_bonus(provider: Provider, context: str) -> int:
    if context == MatchContext.PROGRAMS.value:
        if ServiceType.SCHOOL_QA in (provider.specializations or []):
            return PROGRAMS_CONTEXT_BONUS
    elif context == MatchContext.DASHBOARD.value:
        # Proven mentors get a nudge on the dashboard
        if (provider.total_bookings or 0) >= DASHBOARD_MIN_BOOKINGS:
            return DASHBOARD_CONTEXT_BONUS
    return 0


# =============================================================================
# AGGREGATE
# =============================================================================

def score_breakdown(
    user: User,
    provider: Provider,
    context: str = DEFAULT_CONTEXT,
    now: Optional[datetime] = None,
) -> Dict[str, int]:
    """
    Points contributed by each criterion.

    Args:
        user: Applicant
        provider: Candidate mentor
        context: Display context hint (general, programs, school, dashboard)
        now: Reference time for slot proximity, defaults to current UTC time

    Returns:
        Dict mapping criterion name to points
    """
    now = now or datetime.now(timezone.utc)
    return {
        "focus_match": score_focus_match(user, provider),
        "availability": score_availability(provider, now),
        "rating": score_rating(provider),
        "icu_match": score_icu_match(user, provider),
        "program_match": score_program_match(user, provider),
        "context_bonus": score_context_bonus(provider, context),
    }


def calculate_match_score(
    user: User,
    provider: Provider,
    context: str = DEFAULT_CONTEXT,
    now: Optional[datetime] = None,
) -> int:
    """Overall compatibility score (higher = better match)."""
    return sum(score_breakdown(user, provider, context, now).values())
