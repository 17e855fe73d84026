from __future__ import annotations

import pytest

from src.night_slip.night_slip.core.exceptions import UpstreamFailure


def _login(client, token: str):
    return client.post("/api/auth/login", json={"token": token})


@pytest.fixture
def as_alice(client):
    assert _login(client, "alice-token").status_code == 200
    return client


@pytest.fixture
def as_admin(client):
    assert _login(client, "admin-token").status_code == 200
    return client


def test_requests_without_cookie_are_unauthorized(client):
    res = client.get("/api/dates")

    assert res.status_code == 401
    assert res.get_json() == {"error": "Unauthorized"}


def test_login_sets_cookie_and_me_reports_user(client):
    res = _login(client, "admin-token")

    assert res.status_code == 200
    assert res.get_json()["user"] == {"email": "admin@example.org", "is_admin": True}
    assert "auth_token=admin-token" in res.headers["Set-Cookie"]
    assert "HttpOnly" in res.headers["Set-Cookie"]

    assert client.get("/api/auth/me").get_json() == {"user": {"email": "admin@example.org", "is_admin": True}}


def test_login_errors(client):
    assert client.post("/api/auth/login", json={}).status_code == 400
    assert _login(client, "forged").status_code == 401


def test_logout_clears_identity(as_alice):
    as_alice.post("/api/auth/logout")

    assert as_alice.get("/api/auth/me").get_json() == {"user": None}


def test_member_self_edit_flow(as_alice, spreadsheet):
    url = "/api/dates/d-oct/users/alice@example.org"

    assert as_alice.patch(url, json={"field": "coming", "value": "COMING"}).status_code == 200
    res = as_alice.patch(url, json={"field": "applied", "value": "APPLIED"})
    assert res.status_code == 200
    assert res.get_json()["record"]["is_locked"] == 1

    entries = as_alice.get("/api/dates/d-oct/entries").get_json()
    alice = next(e for e in entries if e["id"] == "alice@example.org")
    assert (alice["attendance_1"], alice["attendance_2"]) == ("PRESENT", "PRESENT")

    locked = as_alice.patch(url, json={"field": "coming", "value": "NOT COMING"})
    assert locked.status_code == 403
    assert "Locked" in locked.get_json()["error"]

    # One mirror push per accepted write, none for the rejected one.
    assert len(spreadsheet.pushed) == 2


def test_member_cannot_edit_other_rows_or_checkpoints(as_alice):
    other = as_alice.patch("/api/dates/d-oct/users/bob@example.org", json={"field": "coming", "value": "COMING"})
    own = as_alice.patch("/api/dates/d-oct/users/alice@example.org", json={"field": "attendance_1", "value": "PRESENT"})

    assert other.status_code == 403
    assert own.status_code == 403
    assert other.get_json()["error"].startswith("Access Denied")


def test_unknown_field_is_403_for_member_and_400_for_admin(client):
    url = "/api/dates/d-oct/users/alice@example.org"
    body = {"field": "is_locked", "value": "0"}

    _login(client, "alice-token")
    assert client.patch(url, json=body).status_code == 403

    _login(client, "admin-token")
    assert client.patch(url, json=body).status_code == 400


def test_update_for_unknown_member_is_404(as_admin):
    res = as_admin.patch("/api/dates/d-oct/users/ghost@example.org", json={"field": "coming", "value": "COMING"})

    assert res.status_code == 404


def test_entries_default_for_every_member(as_alice):
    entries = as_alice.get("/api/dates/d-oct/entries").get_json()

    assert [e["name"] for e in entries] == ["Alice", "Bob"]
    assert all(e["coming"] == "NOT COMING" and e["is_locked"] == 0 for e in entries)


def test_admin_date_lifecycle(as_admin):
    created = as_admin.post("/api/dates", json={"date_string": "2026-12-24"})
    assert created.status_code == 200
    date_id = created.get_json()["id"]

    dup = as_admin.post("/api/dates", json={"date_string": "2026-12-24"})
    assert dup.status_code == 400
    assert dup.get_json() == {"error": "Date already exists"}

    listed = [d["date_string"] for d in as_admin.get("/api/dates").get_json()]
    assert listed == ["2026-12-24", "2026-11-01", "2026-10-18"]

    assert as_admin.delete(f"/api/dates/{date_id}").status_code == 200
    assert as_admin.delete(f"/api/dates/{date_id}").status_code == 404


def test_member_cannot_manage_dates_users_or_sync(as_alice):
    assert as_alice.post("/api/dates", json={"date_string": "2026-12-24"}).status_code == 403
    assert as_alice.delete("/api/dates/d-oct").status_code == 403
    assert as_alice.post("/api/users", json={"users": []}).status_code == 403
    assert as_alice.post("/api/dates/d-oct/reset").status_code == 403
    assert as_alice.post("/api/sync").status_code == 403


def test_bulk_import_and_member_admin(as_admin):
    bad = as_admin.post("/api/users", json={"users": "nope"})
    assert bad.status_code == 400

    res = as_admin.post(
        "/api/users",
        json={"users": [{"name": "Alice", "reg_no": "NEW-REG", "email": "alice@example.org"}, {"name": "x"}]},
    )
    assert res.get_json() == {"success": True, "imported": 1, "skipped": 1}

    users = as_admin.get("/api/users").get_json()
    assert len(users) == 2
    assert users[0]["reg_no"] == "NEW-REG"

    assert as_admin.patch("/api/users/bob@example.org", json={"field": "name", "value": "Robert"}).status_code == 200
    assert as_admin.patch("/api/users/bob@example.org", json={"field": "id", "value": "x"}).status_code == 400
    assert as_admin.delete("/api/users/bob@example.org").status_code == 200
    assert [u["name"] for u in as_admin.get("/api/users").get_json()] == ["Alice"]


def test_reset_clears_date(as_admin, attendance_repo):
    as_admin.patch("/api/dates/d-oct/users/alice@example.org", json={"field": "coming", "value": "COMING"})
    assert attendance_repo.list_for_date("d-oct")

    assert as_admin.post("/api/dates/d-oct/reset").status_code == 200
    assert attendance_repo.list_for_date("d-oct") == []


def test_mirror_failure_does_not_fail_the_write(as_alice, spreadsheet):
    spreadsheet.error = UpstreamFailure("Spreadsheet mirror failed: 500")

    res = as_alice.patch("/api/dates/d-oct/users/alice@example.org", json={"field": "coming", "value": "COMING"})

    assert res.status_code == 200


def test_manual_sync_reports_failure(as_admin, spreadsheet):
    assert as_admin.post("/api/sync").status_code == 200
    assert len(spreadsheet.pushed) == 1

    spreadsheet.error = UpstreamFailure("Spreadsheet mirror failed: 500")
    res = as_admin.post("/api/sync")
    assert res.status_code == 500
    assert res.get_json() == {"error": "Sync failed"}


def test_store_failure_returns_generic_error(as_admin, attendance_repo, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(attendance_repo, "save", broken)

    res = as_admin.patch("/api/dates/d-oct/users/alice@example.org", json={"field": "coming", "value": "COMING"})

    assert res.status_code == 500
    assert res.get_json() == {"error": "Failed to update attendance"}
