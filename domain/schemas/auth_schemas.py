from pydantic import BaseModel, EmailStr, Field

from domain.enums import Role
from domain.schemas.profile_schemas import ProfileResponse


class LoginRequest(BaseModel):
    email: EmailStr


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    dashboard: Role = Field(..., description="Dashboard the session resolves to")
    profile: ProfileResponse
