"""API routes package"""

from . import auth, health, menu, orders, profiles, reminders, reports

__all__ = ["auth", "health", "menu", "orders", "profiles", "reminders", "reports"]
