from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.enums import Role
from domain.models import Profile
from domain.schemas.profile_schemas import ProfileCreate, ProfileUpdateRequest
from repositories import ProfileRepository
from app.config import settings
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("smartcanteen.profile")


class ProfileService:
    """Business logic for profile management"""

    @staticmethod
    def register(db: Session, data: ProfileCreate) -> Profile:
        """
        Create a profile. The role is decided here, never by the client:
        emails listed in ADMIN_EMAILS become admins, everyone else an employee.
        """
        repo = ProfileRepository(db)
        if repo.get_by_email(data.email) is not None:
            raise ConflictError(f"Profile with email {data.email} already exists")

        role = Role.ADMIN if settings.is_admin_email(data.email) else Role.EMPLOYEE
        profile = repo.create_profile(
            email=data.email,
            full_name=data.full_name,
            role=role,
            dietary_preferences=data.dietary_preferences,
        )
        logger.info(
            f"profile_registered profile_id={profile.profile_id} role={role.value}"
        )
        return profile

    @staticmethod
    def get_profile(db: Session, profile_id: UUID) -> Profile:
        profile = ProfileRepository(db).get_by_id(profile_id)
        if profile is None:
            logger.warning(f"profile_not_found profile_id={profile_id}")
            raise NotFoundError(f"Profile {profile_id} not found")
        return profile

    @staticmethod
    def list_profiles(db: Session) -> List[Profile]:
        return ProfileRepository(db).list_all()

    @staticmethod
    def update_profile(
        db: Session, profile: Profile, data: ProfileUpdateRequest
    ) -> Profile:
        """Apply the provided fields; omitted fields keep their value"""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            setattr(profile, field, value)

        profile = ProfileRepository(db).update(profile)
        logger.info(
            f"profile_updated profile_id={profile.profile_id} "
            f"fields={','.join(sorted(changes)) or '-'}"
        )
        return profile
