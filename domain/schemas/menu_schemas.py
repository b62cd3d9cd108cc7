from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime as dt
from uuid import UUID

from domain.enums import MealType


class MenuItemCreate(BaseModel):
    """Schema for adding a dish to the menu. ``date`` defaults to tomorrow."""

    meal_type: MealType
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    is_available: bool = True
    date: Optional[dt.date] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class MenuItemUpdate(BaseModel):
    meal_type: Optional[MealType] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    is_available: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class MenuItemResponse(BaseModel):
    menu_item_id: UUID
    meal_type: MealType
    name: str
    description: Optional[str] = None
    date: dt.date
    is_available: bool
    created_by: Optional[UUID] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
