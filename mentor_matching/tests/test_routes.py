"""
API tests for the recommendations endpoints.
"""

from contextlib import contextmanager
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base, get_db
from main import app
from mentor_matching.models import ProviderProfile


USER = {
    "clinicalProfile": {"primaryIcuType": "cvicu"},
    "guidanceState": {"primaryFocusAreas": [{"area": "essay", "status": "active"}]},
    "targetPrograms": [{"program": {"name": "Duke University"}}],
}


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    @contextmanager
    def _test_db():
        db = session_factory()
        try:
            yield db
            db.commit()
        finally:
            db.close()

    app.dependency_overrides[get_db] = lambda: _test_db()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_recommend_with_supplied_providers(client):
    slot = (datetime.now(timezone.utc) + timedelta(days=1)).isoformat()
    providers = [
        {"id": "low", "name": "Low Match", "status": "approved", "rating": 4.0},
        {
            "id": "duke",
            "name": "Sarah Chen",
            "status": "approved",
            "isPaused": False,
            "availableThisWeek": True,
            "rating": 4.9,
            "previousIcuType": "cvicu",
            "program": "Duke University",
            "specializations": ["essay_review"],
            "nextAvailableSlot": slot,
        },
    ]
    resp = client.post("/recommendations", json={"user": USER, "providers": providers})

    assert resp.status_code == 200
    body = resp.json()
    assert [r["provider"]["id"] for r in body] == ["duke", "low"]
    assert body[0]["score"] == 130
    assert body[0]["reasons"] == ["Available this week", "4.9★ rating"]
    assert body[0]["provider"]["availableThisWeek"] is True
    assert body[1]["reasons"] == ["Highly rated mentor"]


def test_recommend_limit_option(client):
    providers = [{"id": str(i), "status": "approved", "rating": 4.0} for i in range(5)]
    resp = client.post("/recommendations", json={"user": {}, "providers": providers, "options": {"limit": 2}})

    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_recommend_fallback(client):
    providers = [{"id": "a", "status": "pending", "rating": 3.0}, {"id": "b", "status": "rejected", "rating": 4.8}]
    resp = client.post("/recommendations", json={"user": {}, "providers": providers})

    assert resp.status_code == 200
    assert [(r["provider"]["id"], r["score"], r["reasons"]) for r in resp.json()] == [
        ("b", 0, ["Top rated mentor"]),
        ("a", 0, ["Top rated mentor"]),
    ]


def test_recommend_explicit_empty_providers(client):
    assert client.post("/recommendations", json={"user": USER, "providers": []}).json() == []
    assert client.post("/recommendations", json={"user": USER, "providers": None}).json() == []


def test_recommend_loads_providers_from_db(client, session_factory):
    db = session_factory()
    db.add_all([
        ProviderProfile(id="db1", display_name="Sarah", status="approved", program_name="Duke University",
                        specialties=["essay_review"], average_rating=4.9),
        ProviderProfile(id="db2", status="pending", average_rating=5.0),
    ])
    db.commit()
    db.close()

    resp = client.post("/recommendations", json={"user": USER})

    assert resp.status_code == 200
    body = resp.json()
    assert [r["provider"]["id"] for r in body] == ["db1"]
    # focus 40 + available 20 + rating 20 + program 25
    assert body[0]["score"] == 105
    assert body[0]["reasons"] == ["Available this week", "4.9★ rating"]


@pytest.mark.parametrize("payload", [
    {"providers": []},
    {"user": None, "providers": []},
    {"user": "nope", "providers": []},
    {"user": {}, "providers": "nope"},
    {"user": {}, "providers": [1, 2]},
    {"user": {}, "providers": [{"rating": "excellent"}]},
    {"user": {"targetPrograms": "Duke"}, "providers": []},
    {"user": {}, "providers": [], "options": {"limit": -1}},
    {"user": {}, "providers": [], "options": []},
])
def test_recommend_malformed_input_is_400(client, payload):
    assert client.post("/recommendations", json=payload).status_code == 400


def test_available_endpoint(client):
    assert client.post("/recommendations/available", json={"providers": [{"status": "approved", "isPaused": True}]}).json() == {"available": True}
    assert client.post("/recommendations/available", json={"providers": [{"status": "pending"}]}).json() == {"available": False}
    assert client.post("/recommendations/available", json={}).json() == {"available": False}


def test_health(client):
    resp = client.get("/recommendations/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
