"""Pydantic schemas for API requests and responses."""

from recipebox.schemas.auth import (
    AuthResponse,
    MessageResponse,
    ProfileUpdate,
    UserLogin,
    UserProfileResponse,
    UserResponse,
    UserSignup,
)
from recipebox.schemas.engagement import LikeStatus, ReviewCreate, ReviewResponse, ReviewUpdate
from recipebox.schemas.recipe import CuisineListResponse, RecipeCreate, RecipeResponse, RecipeUpdate

__all__ = [
    "UserSignup",
    "UserLogin",
    "ProfileUpdate",
    "UserResponse",
    "UserProfileResponse",
    "AuthResponse",
    "MessageResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "CuisineListResponse",
    "LikeStatus",
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
]
