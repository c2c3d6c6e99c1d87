"""
Tests for reading provider profiles from the database.
"""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from mentor_matching.models import ProviderProfile
from mentor_matching.logic.adapter import provider_from_profile, fetch_providers


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def test_profile_mapping():
    profile = ProviderProfile(
        id="p1",
        user_id="u1",
        display_name="Sarah Chen",
        program_name="Duke University",
        specialties=["mock_interview", "essay_review"],
        previous_icu_type="cvicu",
        is_paused=False,
        status="approved",
        availability_status="available",
        average_rating=4.85,
        total_bookings=31,
        response_time_hours=0.75,
    )
    provider = provider_from_profile(profile)

    assert provider.program == "Duke University"
    assert provider.specializations == ["mock_interview", "essay_review"]
    assert provider.available_this_week is True
    assert provider.rating == 4.85
    assert provider.response_time_minutes == 45
    assert provider.total_bookings == 31
    assert provider.is_approved

    dumped = provider.model_dump(by_alias=True)
    assert dumped["id"] == "p1"
    assert dumped["name"] == "Sarah Chen"
    assert dumped["userId"] == "u1"


def test_profile_defaults():
    provider = provider_from_profile(ProviderProfile(id="p2"))

    assert provider.status == "pending"
    assert provider.rating == 5.0
    assert provider.response_time_minutes == 60
    assert provider.available_this_week is True
    assert provider.is_paused is False
    assert provider.specializations == []
    assert provider.total_bookings == 0
    assert provider.program == ""


def test_unavailable_status():
    provider = provider_from_profile(ProviderProfile(id="p3", availability_status="busy"))
    assert provider.available_this_week is False


def test_fetch_only_approved(db_session):
    db_session.add_all([
        ProviderProfile(id="a", status="approved", average_rating=4.9, created_at=datetime(2025, 1, 1)),
        ProviderProfile(id="b", status="pending", created_at=datetime(2025, 1, 2)),
        ProviderProfile(id="c", status="approved", is_paused=True, created_at=datetime(2025, 1, 3)),
    ])
    db_session.commit()

    providers = fetch_providers(db_session)

    assert [p.model_dump(by_alias=True)["id"] for p in providers] == ["a", "c"]
    assert providers[1].is_paused is True


def test_fetch_respects_limit(db_session):
    db_session.add_all([
        ProviderProfile(id=str(i), status="approved", created_at=datetime(2025, 1, i + 1))
        for i in range(5)
    ])
    db_session.commit()

    assert len(fetch_providers(db_session, limit=2)) == 2
