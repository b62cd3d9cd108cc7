"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.profile import Profile
from domain.models.menu_item import MenuItem
from domain.models.meal_order import MealOrder

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Models
    "Profile",
    "MenuItem",
    "MealOrder",
]
