"""Authentication and profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserSignup(BaseModel):
    """User registration request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class ProfileUpdate(BaseModel):
    """Profile update request. Omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str | None = Field(None, min_length=1, max_length=50)
    profile_picture_url: str | None = Field(None, min_length=1, max_length=2048)
    about_me: str | None = Field(None, max_length=5000)


class UserResponse(BaseModel):
    """User information returned to the account owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    profile_picture_url: str
    about_me: str
    created_at: datetime


class UserProfileResponse(BaseModel):
    """Public user profile."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    profile_picture_url: str
    about_me: str


class AuthResponse(BaseModel):
    """Authentication response. The token itself travels in a cookie."""

    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
