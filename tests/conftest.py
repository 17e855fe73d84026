from __future__ import annotations

import pytest

from src.night_slip.night_slip.auth.policy import AllowListPolicy
from src.night_slip.night_slip.auth.service import AuthService
from src.night_slip.night_slip.container import assemble
from src.night_slip.night_slip.dates.model import TrackedDate
from src.night_slip.night_slip.members.model import Member

from tests.fakes import (
    ADMIN,
    FakeSpreadsheet,
    FakeVerifier,
    InlineExecutor,
    InMemoryAttendance,
    InMemoryDates,
    InMemoryMembers,
    RecordingDispatcher,
)


@pytest.fixture
def policy():
    return AllowListPolicy.from_setting(ADMIN)


@pytest.fixture
def alice():
    return Member(member_id="alice@example.org", name="Alice", reg_no="21BCE0001", email="alice@example.org")


@pytest.fixture
def bob():
    return Member(member_id="bob@example.org", name="Bob", reg_no="21BCE0002", email="bob@example.org")


@pytest.fixture
def members_repo(alice, bob):
    return InMemoryMembers([alice, bob])


@pytest.fixture
def dates_repo(attendance_repo):
    return InMemoryDates(
        [
            TrackedDate(date_id="d-oct", date_string="2026-10-18"),
            TrackedDate(date_id="d-nov", date_string="2026-11-01"),
        ],
        attendance=attendance_repo,
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def spreadsheet():
    return FakeSpreadsheet()


@pytest.fixture
def container(members_repo, dates_repo, attendance_repo, policy, spreadsheet):
    verifier = FakeVerifier(
        {
            "admin-token": ADMIN,
            "alice-token": "Alice@Example.org",
            "bob-token": "bob@example.org",
        }
    )
    return assemble(
        members_repo=members_repo,
        dates_repo=dates_repo,
        attendance_repo=attendance_repo,
        policy=policy,
        auth_service=AuthService(verifier, policy),
        spreadsheet=spreadsheet,
        mirror_executor=InlineExecutor(),
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.night_slip.night_slip.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
