"""
Profile database model.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Enum as SQLEnum,
    Text,
    TIMESTAMP,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import Role


class Profile(Base):
    """Canteen user: employee or admin"""

    __tablename__ = "profile"

    profile_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)
    full_name = Column(Text, nullable=False, default="")
    role = Column(
        SQLEnum(Role, name="profile_role"), nullable=False, default=Role.EMPLOYEE
    )
    dietary_preferences = Column(Text, nullable=False, default="")
    notification_enabled = Column(Boolean, nullable=False, default=True)
    # Calendar day on which the deadline reminder was last issued
    last_reminded_on = Column(Date)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    orders = relationship(
        "MealOrder", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
