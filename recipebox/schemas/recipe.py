"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RecipeCreate(BaseModel):
    """Create a new recipe. Every field is required."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    cuisine: str = Field(..., min_length=1, max_length=100)
    ingredients: str = Field(..., min_length=1, max_length=50000)
    instructions: str = Field(..., min_length=1, max_length=50000)
    recipe_picture_url: str = Field(..., min_length=1, max_length=2048)
    total_prep_time: int = Field(..., ge=0)  # minutes
    difficulty_level: str = Field(..., min_length=1, max_length=50)
    notes: str = Field(..., min_length=1, max_length=50000)


class RecipeUpdate(BaseModel):
    """Update a recipe. Omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    cuisine: str | None = Field(None, min_length=1, max_length=100)
    ingredients: str | None = Field(None, min_length=1, max_length=50000)
    instructions: str | None = Field(None, min_length=1, max_length=50000)
    recipe_picture_url: str | None = Field(None, min_length=1, max_length=2048)
    total_prep_time: int | None = Field(None, ge=0)
    difficulty_level: str | None = Field(None, min_length=1, max_length=50)
    notes: str | None = Field(None, min_length=1, max_length=50000)


class RecipeResponse(BaseModel):
    """Recipe response including engagement counters."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    cuisine: str
    ingredients: str
    instructions: str
    recipe_picture_url: str
    total_prep_time: int
    difficulty_level: str
    notes: str
    likes: int
    reviews: int
    created_at: datetime
    updated_at: datetime


class CuisineListResponse(BaseModel):
    """Distinct cuisines across all recipes."""

    cuisines: list[str]
