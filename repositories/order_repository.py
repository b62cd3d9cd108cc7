"""
Order Repository - Data access layer for meal orders
"""

from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import MealType, OrderStatus
from domain.models import MealOrder, MenuItem


class OrderRepository(BaseRepository[MealOrder]):
    """Repository for meal order data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealOrder)

    def list_for_user(
        self, user_id: UUID, order_date: date, status: OrderStatus = OrderStatus.CONFIRMED
    ) -> List[MealOrder]:
        return (
            self.db.query(MealOrder)
            .filter(
                MealOrder.user_id == user_id,
                MealOrder.order_date == order_date,
                MealOrder.status == status,
            )
            .order_by(MealOrder.meal_type)
            .all()
        )

    def get_for_meal(
        self, user_id: UUID, order_date: date, meal_type: MealType
    ) -> Optional[MealOrder]:
        """The caller's order for one (date, meal type) slot, if any"""
        return (
            self.db.query(MealOrder)
            .filter(
                MealOrder.user_id == user_id,
                MealOrder.order_date == order_date,
                MealOrder.meal_type == meal_type,
            )
            .first()
        )

    def confirmed_item_pairs(self, order_date: date) -> List[Tuple[MealType, str]]:
        """
        (meal type, item name) for every confirmed order on a date.

        Rows come back in order creation sequence so report grouping is stable.
        """
        rows = (
            self.db.query(MenuItem.meal_type, MenuItem.name)
            .join(MealOrder, MealOrder.menu_item_id == MenuItem.menu_item_id)
            .filter(
                MealOrder.order_date == order_date,
                MealOrder.status == OrderStatus.CONFIRMED,
            )
            .order_by(MealOrder.created_at, MealOrder.order_id)
            .all()
        )
        return [(meal_type, name) for meal_type, name in rows]
