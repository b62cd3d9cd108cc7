"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.profile_repository import ProfileRepository
from repositories.menu_repository import MenuRepository
from repositories.order_repository import OrderRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "MenuRepository",
    "OrderRepository",
]
