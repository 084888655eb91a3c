"""Like and review schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LikeStatus(BaseModel):
    """Like state of a recipe for the current user."""

    recipe_id: int
    liked: bool
    likes: int


class ReviewCreate(BaseModel):
    """Create a review."""

    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, max_length=10000)


class ReviewUpdate(BaseModel):
    """Replace the content of a review."""

    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, max_length=10000)


class ReviewResponse(BaseModel):
    """Review response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    recipe_id: int
    content: str
    created_at: datetime
    updated_at: datetime
