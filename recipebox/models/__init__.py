"""SQLAlchemy models."""

from recipebox.models.like import Like
from recipebox.models.recipe import Recipe
from recipebox.models.review import Review
from recipebox.models.user import User

__all__ = [
    "User",
    "Recipe",
    "Like",
    "Review",
]
