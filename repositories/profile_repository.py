"""
Profile Repository - Data access layer for profile operations
"""

from typing import Optional, List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import Role
from domain.models import Profile


class ProfileRepository(BaseRepository[Profile]):
    """Repository for profile data access"""

    def __init__(self, db: Session):
        super().__init__(db, Profile)

    def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email (case-insensitive)"""
        return (
            self.db.query(Profile)
            .filter(Profile.email == email.strip().lower())
            .first()
        )

    def create_profile(
        self,
        email: str,
        full_name: str = "",
        role: Role = Role.EMPLOYEE,
        dietary_preferences: str = "",
    ) -> Profile:
        """Create a new profile"""
        profile = Profile(
            email=email.strip().lower(),
            full_name=full_name,
            role=role,
            dietary_preferences=dietary_preferences,
            notification_enabled=True,
        )
        return self.create(profile)

    def list_all(self) -> List[Profile]:
        return self.db.query(Profile).order_by(Profile.email).all()

    def list_reminder_candidates(self) -> List[Profile]:
        """Employees who opted in to the deadline reminder"""
        return (
            self.db.query(Profile)
            .filter(
                Profile.role == Role.EMPLOYEE,
                Profile.notification_enabled.is_(True),
            )
            .all()
        )
