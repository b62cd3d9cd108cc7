"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.profile_schemas import (
    ProfileCreate,
    ProfileUpdateRequest,
    ProfileResponse,
)
from domain.schemas.auth_schemas import LoginRequest, LoginResponse
from domain.schemas.menu_schemas import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
)
from domain.schemas.order_schemas import (
    OrderToggleRequest,
    OrderToggleResponse,
    MealOrderResponse,
    DashboardMenuItem,
    MealSection,
    MealSelection,
    EmployeeDashboardResponse,
)
from domain.schemas.report_schemas import OrderCountRow, OrderReportResponse
from domain.schemas.reminder_schemas import ReminderResponse, ReminderRunResponse

__all__ = [
    # Profile schemas
    "ProfileCreate",
    "ProfileUpdateRequest",
    "ProfileResponse",
    # Auth schemas
    "LoginRequest",
    "LoginResponse",
    # Menu schemas
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
    # Order schemas
    "OrderToggleRequest",
    "OrderToggleResponse",
    "MealOrderResponse",
    "DashboardMenuItem",
    "MealSection",
    "MealSelection",
    "EmployeeDashboardResponse",
    # Report schemas
    "OrderCountRow",
    "OrderReportResponse",
    # Reminder schemas
    "ReminderResponse",
    "ReminderRunResponse",
]
