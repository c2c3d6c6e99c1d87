import os
from datetime import datetime, timedelta, timezone

import pytest

# db.py refuses to import without a database URL
os.environ.setdefault("DATABASE_URL", "sqlite://")

from mentor_matching.logic.contracts import User, Provider


NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def duke_user():
    return User.model_validate({
        "clinicalProfile": {"primaryIcuType": "cvicu"},
        "guidanceState": {"primaryFocusAreas": [{"area": "essay", "status": "active"}]},
        "targetPrograms": [{"program": {"name": "Duke University"}}],
    })


@pytest.fixture
def empty_user():
    return User()


@pytest.fixture
def make_provider():
    """Bare approved provider that scores 0 unless fields are overridden."""
    def _make(**overrides):
        data = {
            "status": "approved",
            "isPaused": False,
            "availableThisWeek": False,
            "rating": 3.0,
        }
        data.update(overrides)
        return Provider.model_validate(data)
    return _make


@pytest.fixture
def duke_mentor(make_provider):
    return make_provider(
        id="provider_001",
        name="Sarah Chen",
        availableThisWeek=True,
        rating=4.9,
        previousIcuType="cvicu",
        program="Duke University",
        specializations=["essay_review"],
        nextAvailableSlot=(NOW + timedelta(days=2)).isoformat(),
    )
