from __future__ import annotations

import logging

import pytest
import requests

from src.night_slip.night_slip.attendance.model import AttendanceRecord
from src.night_slip.night_slip.core.exceptions import AccessDenied, UpstreamFailure
from src.night_slip.night_slip.mirror.apps_script import AppsScriptMirror
from src.night_slip.night_slip.mirror.dispatcher import MirrorDispatcher
from src.night_slip.night_slip.mirror.service import SyncService
from src.night_slip.night_slip.mirror.snapshot import SnapshotService

from tests.fakes import ADMIN, FakeSpreadsheet, InlineExecutor, RecordingDispatcher


class FakeResponse:
    def __init__(self, status_code: int = 200):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def snapshots(dates_repo, members_repo, attendance_repo):
    attendance_repo.save(AttendanceRecord(member_id="alice@example.org", date_id="d-oct", is_locked=True))
    return SnapshotService(dates_repo, members_repo, attendance_repo)


def test_snapshot_contains_all_three_collections(snapshots):
    snap = snapshots.build()

    assert [d["date_string"] for d in snap["dates"]] == ["2026-11-01", "2026-10-18"]
    assert [u["name"] for u in snap["users"]] == ["Alice", "Bob"]
    assert snap["attendance"] == [
        {
            "id": "alice@example.org_d-oct",
            "user_id": "alice@example.org",
            "date_id": "d-oct",
            "coming": "NOT COMING",
            "applied": "NOT APPLIED",
            "attendance_1": "ABSENT",
            "attendance_2": "ABSENT",
            "is_locked": 1,
        }
    ]


def test_apps_script_mirror_posts_json():
    session = FakeSession()
    mirror = AppsScriptMirror("https://script.example/exec", timeout=3, session=session)

    mirror.push({"dates": [], "users": [], "attendance": []})

    url, kwargs = session.calls[0]
    assert url == "https://script.example/exec"
    assert kwargs["json"] == {"dates": [], "users": [], "attendance": []}
    assert kwargs["timeout"] == 3


def test_apps_script_mirror_without_url_does_nothing():
    session = FakeSession()
    mirror = AppsScriptMirror(None, session=session)

    mirror.push({"dates": []})

    assert not mirror.is_configured()
    assert session.calls == []


@pytest.mark.parametrize(
    "session",
    [FakeSession(response=FakeResponse(502)), FakeSession(error=requests.ConnectionError("down"))],
)
def test_apps_script_failures_become_upstream_failure(session):
    mirror = AppsScriptMirror("https://script.example/exec", session=session)

    with pytest.raises(UpstreamFailure):
        mirror.push({})


def test_dispatch_pushes_snapshot_in_background(snapshots):
    sheet = FakeSpreadsheet()
    dispatcher = MirrorDispatcher(snapshots, sheet, executor=InlineExecutor())

    assert dispatcher.dispatch("test").result() is True
    assert len(sheet.pushed) == 1


def test_dispatch_failure_is_logged_not_raised(snapshots, caplog):
    sheet = FakeSpreadsheet(error=UpstreamFailure("Spreadsheet mirror failed: 500"))
    dispatcher = MirrorDispatcher(snapshots, sheet, executor=InlineExecutor())

    with caplog.at_level(logging.ERROR):
        future = dispatcher.dispatch("attendance update")

    assert future.result() is False
    assert "Apps Script sync error after attendance update" in caplog.text


def test_sync_now_surfaces_failure(snapshots):
    sheet = FakeSpreadsheet(error=UpstreamFailure("Spreadsheet mirror failed: 500"))
    dispatcher = MirrorDispatcher(snapshots, sheet, executor=InlineExecutor())

    with pytest.raises(UpstreamFailure):
        dispatcher.sync_now()


def test_real_thread_pool_runs_dispatch(snapshots):
    sheet = FakeSpreadsheet()
    dispatcher = MirrorDispatcher(snapshots, sheet, max_workers=1)
    try:
        assert dispatcher.dispatch("threaded").result(timeout=5) is True
    finally:
        dispatcher.shutdown()

    assert len(sheet.pushed) == 1


def test_manual_sync_is_admin_only(policy):
    dispatcher = RecordingDispatcher()
    svc = SyncService(dispatcher, policy)

    with pytest.raises(AccessDenied):
        svc.sync_now(actor_email="alice@example.org")

    svc.sync_now(actor_email=ADMIN)
    assert dispatcher.syncs == 1
