from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from core.date_window import (
    deadline_message,
    format_order_date,
    is_ordering_open,
    next_orderable_date,
    parse_order_date,
    time_until_cutoff,
)
from domain.enums import MealType, OrderStatus
from domain.models import MealOrder, Profile
from domain.schemas.menu_schemas import MenuItemResponse
from domain.schemas.order_schemas import (
    DashboardMenuItem,
    EmployeeDashboardResponse,
    MealSection,
    MealSelection,
)
from repositories import MenuRepository, OrderRepository
from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("smartcanteen.orders")


@dataclass
class ToggleResult:
    ordered: bool
    order: Optional[MealOrder] = None
    replaced_order_id: Optional[UUID] = None


class OrderService:
    """Employee ordering for the next orderable date"""

    @staticmethod
    def toggle_order(
        db: Session,
        profile: Profile,
        menu_item_id: UUID,
        now: datetime,
        cutoff_hour: Optional[int] = None,
    ) -> ToggleResult:
        """
        Select or withdraw a dish for tomorrow.

        Selecting the dish already ordered removes the order. Selecting another
        dish of the same meal type replaces the previous order, so there is at
        most one order per (employee, date, meal type).

        Raises:
            ServiceValidationError: ordering closed, item unavailable or not on tomorrow's menu
            NotFoundError: unknown menu item
        """
        cutoff_hour = cutoff_hour if cutoff_hour is not None else settings.cutoff_hour
        if not is_ordering_open(now, cutoff_hour):
            logger.info(f"order_toggle_rejected profile_id={profile.profile_id} reason=closed")
            raise ServiceValidationError(
                "Order deadline has passed. Meal selections for tomorrow can no longer change.",
                code="ORDERING_CLOSED",
            )

        order_date = parse_order_date(next_orderable_date(now))
        item = MenuRepository(db).get_by_id(menu_item_id)
        if item is None:
            raise NotFoundError(f"Menu item {menu_item_id} not found")
        if item.date != order_date:
            raise ServiceValidationError(
                "Only items on tomorrow's menu can be ordered",
                details={"menu_date": item.date.isoformat(), "order_date": order_date.isoformat()},
                code="WRONG_MENU_DATE",
            )

        orders = OrderRepository(db)
        existing = orders.get_for_meal(profile.profile_id, order_date, item.meal_type)

        confirmed = existing is not None and existing.status == OrderStatus.CONFIRMED
        if confirmed and existing.menu_item_id == item.menu_item_id:
            db.delete(existing)
            orders.commit()
            logger.info(
                f"order_removed profile_id={profile.profile_id} order_id={existing.order_id} "
                f"meal_type={item.meal_type.value} date={order_date.isoformat()}"
            )
            return ToggleResult(ordered=False)

        if not item.is_available:
            raise ServiceValidationError(
                f"{item.name} is not available", code="ITEM_UNAVAILABLE"
            )

        replaced_order_id = None
        if existing is not None:
            # a cancelled row still holds the slot but is not a selection
            if confirmed:
                replaced_order_id = existing.order_id
            db.delete(existing)
            # flush the delete first so the unique slot is free for the insert
            db.flush()

        order = MealOrder(
            user_id=profile.profile_id,
            menu_item_id=item.menu_item_id,
            meal_type=item.meal_type,
            order_date=order_date,
            status=OrderStatus.CONFIRMED,
        )
        order = orders.create(order)
        logger.info(
            f"order_confirmed profile_id={profile.profile_id} order_id={order.order_id} "
            f"meal_type={item.meal_type.value} date={order_date.isoformat()} "
            f"replaced={replaced_order_id}"
        )
        return ToggleResult(ordered=True, order=order, replaced_order_id=replaced_order_id)

    @staticmethod
    def list_my_orders(db: Session, profile: Profile, order_date: date) -> List[MealOrder]:
        return OrderRepository(db).list_for_user(profile.profile_id, order_date)

    @staticmethod
    def build_dashboard(
        db: Session,
        profile: Profile,
        now: datetime,
        cutoff_hour: Optional[int] = None,
    ) -> EmployeeDashboardResponse:
        """Tomorrow's available menu, the caller's selections and the deadline state"""
        cutoff_hour = cutoff_hour if cutoff_hour is not None else settings.cutoff_hour
        order_date_str = next_orderable_date(now)
        order_date = parse_order_date(order_date_str)

        items = MenuRepository(db).list_for_date(order_date, available_only=True)
        my_orders = OrderRepository(db).list_for_user(profile.profile_id, order_date)
        ordered_item_ids = {o.menu_item_id for o in my_orders}
        order_by_meal = {o.meal_type: o for o in my_orders}

        menu = []
        selections = []
        for meal_type in MealType:
            section_items = [
                DashboardMenuItem(
                    **MenuItemResponse.model_validate(i).model_dump(),
                    ordered=i.menu_item_id in ordered_item_ids,
                )
                for i in items
                if i.meal_type == meal_type
            ]
            if section_items:
                menu.append(MealSection(meal_type=meal_type, items=section_items))

            order = order_by_meal.get(meal_type)
            selections.append(
                MealSelection(
                    meal_type=meal_type,
                    menu_item_id=order.menu_item_id if order else None,
                    item_name=order.menu_item.name if order else None,
                )
            )

        remaining = time_until_cutoff(now, cutoff_hour)
        return EmployeeDashboardResponse(
            order_date=order_date,
            order_date_label=format_order_date(order_date_str),
            ordering_open=is_ordering_open(now, cutoff_hour),
            cutoff_hour=cutoff_hour,
            hours_remaining=remaining[0] if remaining else None,
            minutes_remaining=remaining[1] if remaining else None,
            deadline_message=deadline_message(now, cutoff_hour),
            menu=menu,
            selections=selections,
        )
