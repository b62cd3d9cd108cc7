"""Login and logout routes"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_bearer_token, get_current_profile, get_db
from api.responses import AUTH_ERROR_RESPONSES
from domain.models import Profile
from domain.schemas.auth_schemas import LoginRequest, LoginResponse
from domain.schemas.profile_schemas import ProfileResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("smartcanteen.api.auth")


@router.post("/login", response_model=LoginResponse, responses=AUTH_ERROR_RESPONSES)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """
    Open a session for a registered profile.

    The returned ``dashboard`` tells the client which view to show: the
    admin dashboard or the employee ordering view.
    """
    token, profile = AuthService.login(db, body.email)
    return LoginResponse(
        access_token=token,
        dashboard=profile.role,
        profile=ProfileResponse.model_validate(profile),
    )


@router.post("/logout", responses=AUTH_ERROR_RESPONSES)
def logout(
    profile: Profile = Depends(get_current_profile),
    token: Optional[str] = Depends(get_bearer_token),
):
    """Close the caller's session"""
    AuthService.logout(token)
    return {"status": "ok"}
