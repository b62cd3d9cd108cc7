"""
Menu item database model.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Text,
    TIMESTAMP,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
from datetime import datetime, timezone

from domain.models.database import Base
from domain.enums import MealType


def _utcnow():
    return datetime.now(timezone.utc)


class MenuItem(Base):
    """A dish offered for one meal category on one date"""

    __tablename__ = "menu_item"

    menu_item_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    meal_type = Column(SQLEnum(MealType, name="meal_type"), nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text)
    date = Column(Date, nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    created_by = Column(
        Uuid, ForeignKey("profile.profile_id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(
        TIMESTAMP(timezone=True), default=_utcnow, server_default=func.now()
    )
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    orders = relationship(
        "MealOrder", back_populates="menu_item", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_menu_item_date_meal_type", "date", "meal_type"),)
