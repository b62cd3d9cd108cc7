from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from domain.enums import Role


class ProfileCreate(BaseModel):
    """Schema for registering a new profile"""

    email: EmailStr
    full_name: str = Field("", max_length=200)
    dietary_preferences: str = Field("", max_length=2000)

    model_config = ConfigDict(extra="forbid")


class ProfileUpdateRequest(BaseModel):
    """Fields an employee may change on their own profile. Role is not one of them."""

    full_name: Optional[str] = Field(None, max_length=200)
    dietary_preferences: Optional[str] = Field(None, max_length=2000)
    notification_enabled: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class ProfileResponse(BaseModel):
    profile_id: UUID
    email: str
    full_name: str
    role: Role
    dietary_preferences: str
    notification_enabled: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
