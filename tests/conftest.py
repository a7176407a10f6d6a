"""
Shared fixtures.

The MongoDB collections are mongomock in-memory collections and the
geocoder is a stub, so no test needs a database or network access.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from devcamper.domain.entities import GeoPoint
from devcamper.domain.ports import Geocoder
from devcamper.infrastructure.mongo import BOOTCAMPS_COLLECTION, USERS_COLLECTION
from devcamper.infrastructure.mongo.stores import bootcamp_store, user_store
from devcamper.infrastructure.security.passwords import Pbkdf2PasswordHasher
from devcamper.interfaces.auth.dependencies import get_password_hasher, get_user_store
from devcamper.interfaces.bootcamps.dependencies import get_bootcamp_store, get_geocoder
from devcamper.main import app
from devcamper.shared.security.rate_limiting import limiter

BOSTON = GeoPoint(
    latitude=42.3505,
    longitude=-71.1054,
    formatted_address="Boston, MA 02134, US",
    city="Boston",
    state="MA",
    zipcode="02134",
    country="US",
)


class StubGeocoder(Geocoder):
    """Geocoder returning fixed points and recording every query."""

    def __init__(self, points: list[GeoPoint]) -> None:
        self.points = points
        self.queries: list[str] = []

    def geocode(self, location: str) -> list[GeoPoint]:
        self.queries.append(location)
        return list(self.points)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()


@pytest.fixture
def database():
    """A fresh in-memory database with the unique indexes in place."""
    db = mongomock.MongoClient()["devcamper_test"]
    db[BOOTCAMPS_COLLECTION].create_index("name", unique=True)
    db[USERS_COLLECTION].create_index("email", unique=True)
    return db


@pytest.fixture
def bootcamps(database):
    return bootcamp_store(database)


@pytest.fixture
def users(database):
    return user_store(database)


@pytest.fixture
def geocoder() -> StubGeocoder:
    return StubGeocoder([BOSTON])


@pytest.fixture
def client(bootcamps, users, geocoder):
    """TestClient wired to the in-memory stores and the stub geocoder."""
    app.dependency_overrides[get_bootcamp_store] = lambda: bootcamps
    app.dependency_overrides[get_user_store] = lambda: users
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    app.dependency_overrides[get_password_hasher] = lambda: Pbkdf2PasswordHasher(iterations=1_000)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def bootcamp_fields() -> dict:
    return {
        "name": "Devworks Bootcamp",
        "description": "Devworks is a full stack JavaScript Bootcamp",
        "website": "https://devworks.com",
        "phone": "(111) 111-1111",
        "email": "enroll@devworks.com",
        "address": "233 Bay State Rd Boston MA 02215",
        "careers": ["Web Development", "UI/UX", "Business"],
        "housing": True,
        "jobAssistance": True,
        "jobGuarantee": False,
        "acceptGi": True,
        "averageCost": 10000,
    }
