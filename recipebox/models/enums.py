"""Enums for model fields and query parameters."""

from enum import Enum


class DifficultyLevel(str, Enum):
    """Difficulty levels accepted by the difficulty search."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class FilterField(str, Enum):
    """Recipe columns a client may filter on."""

    NAME = "name"
    CUISINE = "cuisine"
    DIFFICULTY_LEVEL = "difficulty_level"


class SortField(str, Enum):
    """Recipe columns a client may sort by."""

    NAME = "name"
    LIKES = "likes"
    REVIEWS = "reviews"
    TOTAL_PREP_TIME = "total_prep_time"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
