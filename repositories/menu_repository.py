"""
Menu Repository - Data access layer for menu items
"""

from datetime import date
from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MenuItem


class MenuRepository(BaseRepository[MenuItem]):
    """Repository for menu item data access"""

    def __init__(self, db: Session):
        super().__init__(db, MenuItem)

    def list_for_date(self, menu_date: date, available_only: bool = False) -> List[MenuItem]:
        """Menu items for a date, sorted by meal type then creation time"""
        query = self.db.query(MenuItem).filter(MenuItem.date == menu_date)
        if available_only:
            query = query.filter(MenuItem.is_available.is_(True))
        return query.order_by(MenuItem.meal_type, MenuItem.created_at).all()
