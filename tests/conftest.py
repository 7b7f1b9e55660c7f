"""Shared test fixtures for the Journey API."""

import os
import uuid
from types import SimpleNamespace

# Point the app at SQLite before any journey module builds its engine
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES"] = "false"

import httpx
import pytest
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from journey.core.database import Base
from journey.dependencies.services import get_mailer, get_store
from journey.main import app
import journey.models  # noqa: F401


class FakeStore:
    """In-memory stand-in for TripStore that records every call."""

    def __init__(self):
        self.trips = {}
        self.participants = {}
        self.activities = {}
        self.calls = []
        self.fail_with = None
        # simulates a concurrent request confirming between read and update
        self.lose_confirm_race = False

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if self.fail_with is not None:
            raise self.fail_with

    async def create_trip(self, request):
        self._record("create_trip", request)
        trip_id = uuid.uuid4()
        self.trips[trip_id] = SimpleNamespace(
            id=trip_id,
            destination=request.destination,
            starts_at=request.starts_at,
            ends_at=request.ends_at,
            is_confirmed=False,
            owner_name=request.owner_name,
            owner_email=request.owner_email,
        )
        for email in request.emails_to_invite:
            pid = uuid.uuid4()
            self.participants[pid] = SimpleNamespace(
                id=pid, trip_id=trip_id, email=email, is_confirmed=False
            )
        return trip_id

    async def get_participant(self, participant_id):
        self._record("get_participant", participant_id)
        if participant_id not in self.participants:
            raise NoResultFound("No row was found when one was required")
        return self.participants[participant_id]

    async def confirm_participant(self, participant_id):
        self._record("confirm_participant", participant_id)
        participant = self.participants[participant_id]
        if participant.is_confirmed or self.lose_confirm_race:
            return False
        participant.is_confirmed = True
        return True

    async def get_trip(self, trip_id):
        self._record("get_trip", trip_id)
        if trip_id not in self.trips:
            raise NoResultFound("No row was found when one was required")
        return self.trips[trip_id]

    async def get_trip_activities(self, trip_id):
        self._record("get_trip_activities", trip_id)
        if trip_id not in self.trips:
            raise NoResultFound("No row was found when one was required")
        return self.activities.get(trip_id, [])

    def add_participant(self, is_confirmed=False):
        pid = uuid.uuid4()
        self.participants[pid] = SimpleNamespace(
            id=pid, trip_id=uuid.uuid4(), email="guest@example.com", is_confirmed=is_confirmed
        )
        return pid


class FakeMailer:
    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send_confirm_trip_email_to_trip_owner(self, trip_id):
        self.sent.append(trip_id)
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@pytest.fixture
async def client(fake_store, fake_mailer):
    """AsyncClient against the app with the store and mailer swapped for fakes."""
    app.dependency_overrides[get_store] = lambda: fake_store
    app.dependency_overrides[get_mailer] = lambda: fake_mailer
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def session_factory():
    """Session factory bound to a fresh in-memory SQLite schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session
