from datetime import date, datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from core.date_window import next_orderable_date, parse_order_date
from domain.models import MenuItem, Profile
from domain.schemas.menu_schemas import MenuItemCreate, MenuItemUpdate
from repositories import MenuRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("smartcanteen.menu")


class MenuService:
    """Admin-side menu management"""

    @staticmethod
    def list_menu(db: Session, menu_date: date) -> List[MenuItem]:
        return MenuRepository(db).list_for_date(menu_date)

    @staticmethod
    def get_item(db: Session, menu_item_id: UUID) -> MenuItem:
        item = MenuRepository(db).get_by_id(menu_item_id)
        if item is None:
            raise NotFoundError(f"Menu item {menu_item_id} not found")
        return item

    @staticmethod
    def create_item(
        db: Session, admin: Profile, data: MenuItemCreate, now: datetime
    ) -> MenuItem:
        """
        Add a dish to the menu.

        Without an explicit date the item goes on tomorrow's menu. Items can
        only be created for future dates.
        """
        menu_date: Optional[date] = data.date
        if menu_date is None:
            menu_date = parse_order_date(next_orderable_date(now))
        elif menu_date <= now.date():
            raise ServiceValidationError(
                "Menu items can only be created for a future date",
                details={"date": menu_date.isoformat()},
            )

        item = MenuItem(
            meal_type=data.meal_type,
            name=data.name,
            description=data.description,
            date=menu_date,
            is_available=data.is_available,
            created_by=admin.profile_id,
        )
        item = MenuRepository(db).create(item)
        logger.info(
            f"menu_item_created menu_item_id={item.menu_item_id} "
            f"date={menu_date.isoformat()} meal_type={item.meal_type.value}"
        )
        return item

    @staticmethod
    def update_item(db: Session, menu_item_id: UUID, data: MenuItemUpdate) -> MenuItem:
        repo = MenuRepository(db)
        item = repo.get_by_id(menu_item_id)
        if item is None:
            raise NotFoundError(f"Menu item {menu_item_id} not found")

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if value is None and field != "description":
                continue
            setattr(item, field, value)

        item = repo.update(item)
        logger.info(
            f"menu_item_updated menu_item_id={menu_item_id} "
            f"fields={','.join(sorted(changes)) or '-'}"
        )
        return item

    @staticmethod
    def delete_item(db: Session, menu_item_id: UUID) -> None:
        """Delete a menu item together with the orders placed for it"""
        if not MenuRepository(db).delete(menu_item_id):
            raise NotFoundError(f"Menu item {menu_item_id} not found")
        logger.info(f"menu_item_deleted menu_item_id={menu_item_id}")
