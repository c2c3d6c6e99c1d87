"""
Match Reason Explainer

Builds short, human-readable reasons for why a mentor was recommended.
Reasons are independent of the score and never expose score internals.
"""

from typing import List

from .contracts import User, Provider
from .constants import (
    FOCUS_AREA_PROFILES,
    REASON_AVAILABLE,
    REASON_TARGET_SCHOOL,
    REASON_QUICK_RESPONDER,
    REASON_MIN_RATING,
    QUICK_RESPONSE_MINUTES,
    MAX_REASONS,
)
from .scorer import provider_offers_focus, icu_matches, program_matches


def format_icu_label(icu_type: str) -> str:
    """'neuro_icu' -> 'NEURO ICU'"""
    return icu_type.upper().replace("_", " ")


def get_match_reasons(user: User, provider: Provider) -> List[str]:
    """
    Collect matching reasons in priority order and keep the first two.

    Args:
        user: Applicant
        provider: Candidate mentor

    Returns:
        Up to MAX_REASONS reason strings, possibly empty
    """
    reasons: List[str] = []

    if provider.is_bookable:
        reasons.append(REASON_AVAILABLE)

    if provider.rating is not None and provider.rating >= REASON_MIN_RATING:
        reasons.append(f"{provider.rating:.1f}★ rating")

    if icu_matches(user, provider):
        reasons.append(f"Also {format_icu_label(user.icu_type())}")

    if program_matches(user, provider):
        reasons.append(REASON_TARGET_SCHOOL)

    focus = user.active_focus_area()
    label = FOCUS_AREA_PROFILES[focus]["label"] if focus in FOCUS_AREA_PROFILES else None
    if label and provider_offers_focus(user, provider):
        reasons.append(label)

    if provider.response_time_minutes and provider.response_time_minutes < QUICK_RESPONSE_MINUTES:
        reasons.append(REASON_QUICK_RESPONDER)

    return reasons[:MAX_REASONS]
