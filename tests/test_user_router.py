# tests/test_user_router.py

from __future__ import annotations

import pytest

from ramplo.config import AUTH_EMAIL_HEADER


def test_root(client) -> None:
    assert client.get("/").json() == {"message": "RampLO API is running."}


def test_missing_identity_is_401(client) -> None:
    resp = client.get("/api/auth/user")

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"


@pytest.mark.parametrize("raw", [" @", "not-an-email", "@example.com"])
def test_malformed_identity_is_401(client, db, raw) -> None:
    resp = client.get("/api/auth/user", headers={AUTH_EMAIL_HEADER: raw})

    assert resp.status_code == 401
    assert db["users"].docs == []


def test_first_request_creates_user_and_progress(client, db, auth_headers) -> None:
    resp = client.get("/api/auth/user", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["user"]["email"] == "new.lo@example.com"
    assert body["user"]["is_morty_user"] is False
    assert body["profile"] is None
    assert body["progress"]["current_week"] == 1
    assert body["progress"]["current_day"] == 1
    assert body["progress"]["tasks_completed"] == 0

    # Second request reuses the same user
    client.get("/api/auth/user", headers=auth_headers)
    assert len(db["users"].docs) == 1
    assert len(db["user_progress"].docs) == 1


def test_morty_domain_sets_flag(client) -> None:
    resp = client.get(
        "/api/auth/user", headers={AUTH_EMAIL_HEADER: "Officer@Platform.Morty.com"}
    )

    assert resp.json()["user"]["is_morty_user"] is True
    assert resp.json()["user"]["email"] == "officer@platform.morty.com"


def test_onboarding_creates_profile_and_tasks(client, db, auth_headers) -> None:
    resp = client.post(
        "/api/onboarding",
        json={"first_name": "Dana", "focus": ["purchase"], "markets": ["Austin"]},
        headers=auth_headers,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["profile"]["onboarding_completed"] is True
    assert body["tasks_created"] == len(db["tasks"].docs) == 197

    snapshot = client.get("/api/auth/user", headers=auth_headers).json()
    assert snapshot["profile"]["first_name"] == "Dana"


def test_onboarding_twice_is_conflict(client, onboarded) -> None:
    resp = client.post("/api/onboarding", json={}, headers=onboarded)

    assert resp.status_code == 409


def test_onboarding_rejects_more_than_four_markets(client, auth_headers) -> None:
    resp = client.post(
        "/api/onboarding",
        json={"markets": ["a", "b", "c", "d", "e"]},
        headers=auth_headers,
    )

    assert resp.status_code == 422


def test_progress_update(client, auth_headers) -> None:
    resp = client.patch(
        "/api/progress",
        json={"applications_submitted": 3, "loans_closed": 1},
        headers=auth_headers,
    )

    assert resp.status_code == 200
    assert resp.json()["applications_submitted"] == 3
    assert resp.json()["loans_closed"] == 1
    assert resp.json()["tasks_completed"] == 0


def test_progress_update_rejects_negative_counts(client, auth_headers) -> None:
    resp = client.patch(
        "/api/progress", json={"loans_closed": -1}, headers=auth_headers
    )

    assert resp.status_code == 422
