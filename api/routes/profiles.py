"""Profile routes: registration and self-service settings"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_current_profile, get_db, require_admin
from api.responses import AUTH_ERROR_RESPONSES
from domain.models import Profile
from domain.schemas.profile_schemas import (
    ProfileCreate,
    ProfileResponse,
    ProfileUpdateRequest,
)
from services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])
logger = logging.getLogger("smartcanteen.api.profiles")


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def register_profile(body: ProfileCreate, db: Session = Depends(get_db)):
    """Register a new profile. The role is assigned by the server."""
    return ProfileService.register(db, body)


@router.get("", response_model=List[ProfileResponse], responses=AUTH_ERROR_RESPONSES)
def list_profiles(
    admin: Profile = Depends(require_admin), db: Session = Depends(get_db)
):
    """All profiles (admin only)"""
    return ProfileService.list_profiles(db)


@router.get("/me", response_model=ProfileResponse, responses=AUTH_ERROR_RESPONSES)
def get_my_profile(profile: Profile = Depends(get_current_profile)):
    return profile


@router.put("/me", response_model=ProfileResponse, responses=AUTH_ERROR_RESPONSES)
def update_my_profile(
    body: ProfileUpdateRequest,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Update display name, dietary preferences and the reminder opt-in"""
    return ProfileService.update_profile(db, profile, body)
