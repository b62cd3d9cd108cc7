"""Employee ordering routes"""

from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_now, require_employee
from api.responses import AUTH_ERROR_RESPONSES
from core.date_window import next_orderable_date, parse_order_date
from domain.models import Profile
from domain.schemas.order_schemas import (
    EmployeeDashboardResponse,
    MealOrderResponse,
    OrderToggleRequest,
    OrderToggleResponse,
)
from services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"], responses=AUTH_ERROR_RESPONSES)
logger = logging.getLogger("smartcanteen.api.orders")


@router.get("/dashboard", response_model=EmployeeDashboardResponse)
def employee_dashboard(
    profile: Profile = Depends(require_employee),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Tomorrow's menu, the caller's selections and time left to order"""
    return OrderService.build_dashboard(db, profile, now)


@router.post("/toggle", response_model=OrderToggleResponse)
def toggle_order(
    body: OrderToggleRequest,
    profile: Profile = Depends(require_employee),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """
    Select a dish for tomorrow, or withdraw it when it is already selected.

    Returns 400 with code ORDERING_CLOSED once the daily cutoff has passed.
    """
    result = OrderService.toggle_order(db, profile, body.menu_item_id, now)
    return OrderToggleResponse(
        ordered=result.ordered,
        order=MealOrderResponse.model_validate(result.order) if result.order else None,
        replaced_order_id=result.replaced_order_id,
    )


@router.get("/me", response_model=List[MealOrderResponse])
def my_orders(
    order_date: Optional[date] = Query(
        None, alias="date", description="Order date (YYYY-MM-DD), defaults to tomorrow"
    ),
    profile: Profile = Depends(require_employee),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    if order_date is None:
        order_date = parse_order_date(next_orderable_date(now))
    return OrderService.list_my_orders(db, profile, order_date)
