"""
Shared fixtures: an isolated in-memory store per test and a fixed clock
"""
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from charter_ops.database.models import DatabaseManager
from charter_ops.database.repository import CharterRepository
from charter_ops.database.seed import seed_demo_data
from charter_ops.models.schemas import Booking, BookingStatus, StaffMember

NOW = datetime(2024, 8, 10, 12, 0)

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def make_booking():
    def _make(booking_id=1, start_offset=timedelta(days=1), duration=timedelta(hours=4),
              status=BookingStatus.PENDING, now=NOW):
        start = now + start_offset
        return Booking(id=booking_id, start_time=start, end_time=start + duration, status=status)
    return _make

@pytest.fixture
def staff_roster():
    return [
        StaffMember(id=1, username="captain_a", role="captain", status="available"),
        StaffMember(id=2, username="captain_b", role="captain", status="unavailable"),
        StaffMember(id=3, username="mate_a", role="first_mate", status="available"),
        StaffMember(id=4, username="mate_b", role="first_mate", status="on_leave"),
        StaffMember(id=5, username="crew_a", role="crew_member", status="available"),
        StaffMember(id=6, username="crew_b", role="crew_member", status="available"),
        StaffMember(id=7, username="crew_c", role="crew_member", status="unavailable"),
        StaffMember(id=8, username="coord", role="coordinator", status="available"),
    ]

@pytest.fixture
def repository():
    manager = DatabaseManager("sqlite:///:memory:")
    manager.create_tables()
    yield CharterRepository(manager)
    manager.drop_tables()
    manager.close()

@pytest.fixture
def staffed_repository(repository, staff_roster):
    for member in staff_roster:
        repository.add_staff(member)
    return repository

@pytest.fixture
def seeded_repository(repository, now):
    seed_demo_data(repository, now)
    return repository

@pytest.fixture
def client(seeded_repository):
    from charter_ops.web.app import app, get_repository
    app.dependency_overrides[get_repository] = lambda: seeded_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
