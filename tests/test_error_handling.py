"""
Tests for the error envelope, repository error translation and the health check.
"""

import pytest
from sqlalchemy.exc import OperationalError

from api.dependencies import get_db
from app.exceptions import ConflictError, DataAccessError, NotFoundError
from domain.models import MealOrder
from domain.enums import MealType, OrderStatus
from main import app
from repositories import OrderRepository, ProfileRepository
from test_fixtures import TOMORROW, client, db_session, make_menu_item, make_profile


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "SmartCanteen"


def test_responses_carry_request_id():
    r = client.get("/health-check")
    assert r.headers["X-Request-ID"]


def test_unknown_route_uses_error_envelope():
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "HTTP_404"
    assert "timestamp" in body


def test_validation_error_lists_details():
    r = client.post("/profiles", json={})
    assert r.status_code == 422
    assert r.json()["error"]["details"]


def test_error_to_dict():
    err = NotFoundError("Menu item 1 not found", details={"id": 1})
    assert err.to_dict() == {
        "code": "NOT_FOUND",
        "message": "Menu item 1 not found",
        "details": {"id": 1},
    }
    assert DataAccessError().http_status == 503


# =============================================================================
# REPOSITORY ERROR TRANSLATION
# =============================================================================


def test_duplicate_email_commit_raises_conflict(db_session):
    profile = make_profile(db_session)
    with pytest.raises(ConflictError):
        ProfileRepository(db_session).create_profile(email=profile.email)

    # session is usable again after the rollback
    assert ProfileRepository(db_session).get_by_email(profile.email) is not None


def test_second_order_for_same_meal_raises_conflict(db_session):
    profile = make_profile(db_session)
    rice = make_menu_item(db_session, "Rice Bowl")
    pasta = make_menu_item(db_session, "Pasta")
    repo = OrderRepository(db_session)

    for item in (rice, pasta):
        order = MealOrder(
            user_id=profile.profile_id,
            menu_item_id=item.menu_item_id,
            meal_type=MealType.LUNCH,
            order_date=TOMORROW,
            status=OrderStatus.CONFIRMED,
        )
        if item is rice:
            repo.create(order)
        else:
            with pytest.raises(ConflictError):
                repo.create(order)

    assert len(repo.list_for_user(profile.profile_id, TOMORROW)) == 1


class _BrokenSession:
    def get(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    def close(self):
        pass


def test_store_outage_maps_to_503():
    app.dependency_overrides[get_db] = lambda: _BrokenSession()

    r = client.post("/auth/login", json={"email": "someone@example.com"})
    assert r.status_code == 503
    assert r.json()["error"]["code"] == "DATA_ACCESS_ERROR"
