"""
User Pydantic Schemas
Request and response models for user-related endpoints.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from emur.core.constants import DATE_OF_BIRTH_FORMAT


# ============================================================================
# Authentication Schemas
# ============================================================================

class LoginRequest(BaseModel):
    """
    Schema for user login request.

    Example:
        {
            "email": "user@example.com",
            "password": "SecurePass123!"
        }
    """
    email: EmailStr = Field(..., examples=["user@example.com"])
    password: str = Field(..., min_length=1, examples=["SecurePass123!"])


class SignUpRequest(BaseModel):
    """
    Schema for user registration request.

    Only the credentials are collected at signup; the profile is filled in
    later through PUT /api/v1/users.
    """
    email: EmailStr = Field(..., description="Valid email address, used as login")
    password: str = Field(..., min_length=1, description="Plain password, stored as a bcrypt hash")


class TokenData(BaseModel):
    """
    Login result.

    Example:
        {"token": "Bearer eyJhbGciOiJIUzI1NiIs..."}
    """
    token: str


# ============================================================================
# User Profile Schemas
# ============================================================================

class UserUpdate(BaseModel):
    """
    Profile update.

    city and country are mandatory because the forecast worker polls by
    location. date_of_birth is accepted as DD-MM-YYYY.
    """
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[date] = Field(None, examples=["31-12-1990"])
    sex: Optional[str] = Field(None, max_length=50)
    user_type: Optional[str] = Field(None, max_length=100)
    city: str = Field(..., min_length=1, max_length=255)
    country: str = Field(..., min_length=1, max_length=255)

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def parse_date_of_birth(cls, v):
        if v is None or v == "":
            return None
        if isinstance(v, date):
            return v
        try:
            return datetime.strptime(str(v), DATE_OF_BIRTH_FORMAT).date()
        except ValueError:
            raise ValueError("date_of_birth must use the DD-MM-YYYY format")

    @field_validator("city", "country")
    @classmethod
    def strip_location(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class UserResponse(BaseModel):
    """
    Schema for user profile response.

    Never includes the password hash nor the internal id.
    """
    uuid: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image: Optional[str] = None
    date_of_birth: Optional[date] = None
    sex: Optional[str] = None
    email: str
    user_type: Optional[str] = None
    is_active: bool
    is_banned: bool
    city: Optional[str] = None
    country: Optional[str] = None
    role: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
