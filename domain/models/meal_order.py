"""
Meal order database model.
"""

from sqlalchemy import (
    Column,
    Date,
    Enum as SQLEnum,
    ForeignKey,
    TIMESTAMP,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
from datetime import datetime, timezone

from domain.models.database import Base
from domain.enums import MealType, OrderStatus


def _utcnow():
    return datetime.now(timezone.utc)


class MealOrder(Base):
    """An employee's selection of one menu item for one date and meal category"""

    __tablename__ = "meal_order"

    order_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("profile.profile_id", ondelete="CASCADE"),
        nullable=False,
    )
    menu_item_id = Column(
        Uuid,
        ForeignKey("menu_item.menu_item_id", ondelete="CASCADE"),
        nullable=False,
    )
    meal_type = Column(SQLEnum(MealType, name="meal_type"), nullable=False)
    order_date = Column(Date, nullable=False)
    status = Column(
        SQLEnum(OrderStatus, name="order_status"),
        nullable=False,
        default=OrderStatus.CONFIRMED,
    )
    created_at = Column(
        TIMESTAMP(timezone=True), default=_utcnow, server_default=func.now()
    )
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("Profile", back_populates="orders")
    menu_item = relationship("MenuItem", back_populates="orders")

    __table_args__ = (
        UniqueConstraint(
            "user_id", "order_date", "meal_type", name="uq_order_user_date_meal"
        ),
    )
