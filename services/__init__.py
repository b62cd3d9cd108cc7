"""Services package - Business logic layer"""

from services.auth_service import AuthService, SessionStore, session_store
from services.profile_service import ProfileService
from services.menu_service import MenuService
from services.order_service import OrderService, ToggleResult
from services.report_service import ReportService
from services.reminder_service import (
    ReminderInbox,
    ReminderService,
    reminder_inbox,
)

__all__ = [
    "AuthService",
    "SessionStore",
    "session_store",
    "ProfileService",
    "MenuService",
    "OrderService",
    "ToggleResult",
    "ReportService",
    "ReminderInbox",
    "ReminderService",
    "reminder_inbox",
]
