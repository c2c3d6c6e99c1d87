"""
Data Adapter for the Mentor Matching Engine

Reads provider profiles from the database and transforms them into Provider
records for the matching engine.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO ranking
- NO DB writes
"""

import logging
import os
from typing import List

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from mentor_matching.models import ProviderProfile
from .contracts import Provider
from .constants import ProviderStatus

logger = logging.getLogger(__name__)

PROVIDER_FETCH_LIMIT = int(os.getenv("PROVIDER_FETCH_LIMIT", "200"))

# Profiles without a rating yet are shown as 5.0
DEFAULT_RATING = 5.0
DEFAULT_RESPONSE_TIME_MINUTES = 60


def provider_from_profile(profile: ProviderProfile) -> Provider:
    """
    Convert a provider_profiles row into a Provider record.

    Args:
        profile: ORM row

    Returns:
        Provider with engine field names
    """
    availability = profile.availability_status or "available"

    if profile.response_time_hours:
        response_minutes = round(profile.response_time_hours * 60)
    else:
        response_minutes = DEFAULT_RESPONSE_TIME_MINUTES

    return Provider(
        id=profile.id,
        userId=profile.user_id,
        name=profile.display_name,
        tagline=profile.tagline or "",
        program=profile.program_name or "",
        programYear=profile.program_year or 1,
        previous_icu_type=profile.previous_icu_type,
        specializations=list(profile.specialties or []),
        is_paused=bool(profile.is_paused),
        status=profile.status or ProviderStatus.PENDING.value,
        availabilityStatus=availability,
        available_this_week=availability == "available",
        next_available_slot=profile.next_available_slot,
        total_bookings=profile.total_bookings or 0,
        rating=float(profile.average_rating) if profile.average_rating else DEFAULT_RATING,
        response_time_minutes=response_minutes,
    )


def fetch_providers(db: Session, limit: int = PROVIDER_FETCH_LIMIT) -> List[Provider]:
    """
    Fetch approved provider profiles and convert them.

    Args:
        db: Database session
        limit: Maximum rows to read

    Returns:
        List of Provider records
    """
    stmt = (
        select(ProviderProfile)
        .where(ProviderProfile.status == ProviderStatus.APPROVED.value)
        .order_by(ProviderProfile.created_at)
        .limit(limit)
    )
    rows = db.execute(stmt).scalars().all()

    providers = []
    for row in rows:
        try:
            providers.append(provider_from_profile(row))
        except ValidationError as e:
            # Skip profiles that fail conversion
            logger.warning(f"Failed to convert provider profile {row.id}: {e}")
            continue

    logger.info(f"Loaded {len(providers)} approved providers")
    return providers
