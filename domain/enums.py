"""
Domain enums for SmartCanteen application.
Contains all enumeration types used across the domain models.
"""

import enum


class Role(str, enum.Enum):
    """Profile role; decides which dashboard a session resolves to"""

    EMPLOYEE = "employee"
    ADMIN = "admin"


class MealType(str, enum.Enum):
    """Meal categories partitioning the menu and orders"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"


class OrderStatus(str, enum.Enum):
    """Meal order status"""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
