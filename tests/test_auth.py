"""
Tests for login, logout and session resolution.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from domain.enums import Role
from services.auth_service import SessionStore
from test_fixtures import client, db_session, login, make_admin, make_profile, unique_email


def test_login_employee_resolves_employee_dashboard(db_session):
    profile = make_profile(db_session)

    r = client.post("/auth/login", json={"email": profile.email})
    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["dashboard"] == "employee"
    assert body["profile"]["profile_id"] == str(profile.profile_id)


def test_login_admin_resolves_admin_dashboard(db_session):
    admin = make_admin(db_session)

    r = client.post("/auth/login", json={"email": admin.email})
    assert r.status_code == 200
    assert r.json()["dashboard"] == "admin"


def test_login_is_case_insensitive(db_session):
    profile = make_profile(db_session)

    r = client.post("/auth/login", json={"email": profile.email.upper()})
    assert r.status_code == 200


def test_login_unknown_email():
    r = client.post("/auth/login", json={"email": unique_email()})
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert r.headers["WWW-Authenticate"] == "Bearer"


def test_login_rejects_malformed_email():
    r = client.post("/auth/login", json={"email": "not-an-email"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_protected_route_without_token():
    r = client.get("/profiles/me")
    assert r.status_code == 401
    assert r.json()["success"] is False


def test_protected_route_with_unknown_token():
    r = client.get("/profiles/me", headers={"Authorization": "Bearer nope"})
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "INVALID_SESSION"


def test_logout_closes_the_session(db_session):
    profile = make_profile(db_session)
    headers = login(profile.email)

    assert client.get("/profiles/me", headers=headers).status_code == 200

    r = client.post("/auth/logout", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    assert client.get("/profiles/me", headers=headers).status_code == 401


def test_sessions_are_independent(db_session):
    profile = make_profile(db_session)
    first = login(profile.email)
    second = login(profile.email)

    client.post("/auth/logout", headers=first)
    assert client.get("/profiles/me", headers=second).status_code == 200


# =============================================================================
# SESSION STORE
# =============================================================================


def test_session_store_open_resolve_close():
    store = SessionStore(ttl_minutes=5)
    profile_id = uuid.uuid4()

    token = store.open(profile_id)
    assert store.resolve(token) == profile_id
    assert len(store) == 1

    assert store.close(token) is True
    assert store.close(token) is False
    assert store.resolve(token) is None


def test_session_store_expires_tokens():
    store = SessionStore(ttl_minutes=5)
    token = store.open(uuid.uuid4())

    # push the expiry into the past
    profile_id, _ = store._sessions[token]
    store._sessions[token] = (profile_id, datetime.now(timezone.utc) - timedelta(seconds=1))

    assert store.resolve(token) is None
    assert len(store) == 0


def test_session_store_purges_abandoned_sessions_on_open():
    store = SessionStore(ttl_minutes=5)
    live = store.open(uuid.uuid4())
    abandoned = [store.open(uuid.uuid4()) for _ in range(3)]

    past = datetime.now(timezone.utc) - timedelta(seconds=1)
    for token in abandoned:
        profile_id, _ = store._sessions[token]
        store._sessions[token] = (profile_id, past)

    fresh = store.open(uuid.uuid4())
    assert len(store) == 2
    assert store.resolve(live) is not None
    assert store.resolve(fresh) is not None


def test_session_store_does_not_grow_with_expired_sessions():
    store = SessionStore(ttl_minutes=0)
    for _ in range(100):
        store.open(uuid.uuid4())
    assert len(store) == 1


@pytest.mark.parametrize("role", [Role.EMPLOYEE, Role.ADMIN])
def test_me_returns_caller_for_both_roles(db_session, role):
    profile = make_profile(db_session, role=role)
    r = client.get("/profiles/me", headers=login(profile.email))
    assert r.status_code == 200
    assert r.json()["role"] == role.value
