"""Menu management routes (admin)"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_now, require_admin
from api.responses import AUTH_ERROR_RESPONSES
from core.date_window import next_orderable_date, parse_order_date
from domain.models import Profile
from domain.schemas.menu_schemas import (
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
)
from services.menu_service import MenuService

router = APIRouter(prefix="/menu", tags=["Menu"], responses=AUTH_ERROR_RESPONSES)
logger = logging.getLogger("smartcanteen.api.menu")


@router.get("", response_model=List[MenuItemResponse])
def list_menu(
    menu_date: Optional[date] = Query(
        None, alias="date", description="Menu date (YYYY-MM-DD), defaults to tomorrow"
    ),
    admin: Profile = Depends(require_admin),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    if menu_date is None:
        menu_date = parse_order_date(next_orderable_date(now))
    return MenuService.list_menu(db, menu_date)


@router.post("", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def create_menu_item(
    body: MenuItemCreate,
    admin: Profile = Depends(require_admin),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    return MenuService.create_item(db, admin, body, now)


@router.get("/{menu_item_id}", response_model=MenuItemResponse)
def get_menu_item(
    menu_item_id: UUID,
    admin: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return MenuService.get_item(db, menu_item_id)


@router.put("/{menu_item_id}", response_model=MenuItemResponse)
def update_menu_item(
    menu_item_id: UUID,
    body: MenuItemUpdate,
    admin: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return MenuService.update_item(db, menu_item_id, body)


@router.delete("/{menu_item_id}")
def delete_menu_item(
    menu_item_id: UUID,
    admin: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a menu item and the orders placed for it"""
    MenuService.delete_item(db, menu_item_id)
    return {"status": "ok", "deleted": str(menu_item_id)}
