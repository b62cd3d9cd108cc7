from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date, datetime
from uuid import UUID

from domain.enums import MealType, OrderStatus
from domain.schemas.menu_schemas import MenuItemResponse


class OrderToggleRequest(BaseModel):
    menu_item_id: UUID


class MealOrderResponse(BaseModel):
    order_id: UUID
    user_id: UUID
    menu_item_id: UUID
    meal_type: MealType
    order_date: date
    status: OrderStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class OrderToggleResponse(BaseModel):
    """Outcome of a toggle: ``ordered`` is false when the selection was withdrawn"""

    ordered: bool
    order: Optional[MealOrderResponse] = None
    replaced_order_id: Optional[UUID] = None


class DashboardMenuItem(MenuItemResponse):
    ordered: bool = False


class MealSection(BaseModel):
    meal_type: MealType
    items: List[DashboardMenuItem]


class MealSelection(BaseModel):
    meal_type: MealType
    menu_item_id: Optional[UUID] = None
    item_name: Optional[str] = Field(None, description="None when nothing is ordered")


class EmployeeDashboardResponse(BaseModel):
    """Everything the employee view needs for the next orderable date"""

    order_date: date
    order_date_label: str
    ordering_open: bool
    cutoff_hour: int
    hours_remaining: Optional[int] = None
    minutes_remaining: Optional[int] = None
    deadline_message: str
    menu: List[MealSection]
    selections: List[MealSelection]
