"""
API dependencies for dependency injection
"""

from datetime import datetime
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ForbiddenError
from core.clock import local_now
from domain.enums import Role
from domain.models import Profile, get_db_session
from services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_now() -> datetime:
    """Current time on the canteen clock; overridden in tests"""
    return local_now(settings.time_zone)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_profile(
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> Profile:
    return AuthService.resolve_profile(db, token)


def require_admin(profile: Profile = Depends(get_current_profile)) -> Profile:
    if not profile.is_admin:
        raise ForbiddenError("Admin access required")
    return profile


def require_employee(profile: Profile = Depends(get_current_profile)) -> Profile:
    if profile.role != Role.EMPLOYEE:
        raise ForbiddenError("Only employees can order meals")
    return profile
