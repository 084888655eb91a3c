"""Recipe catalogue queries.

Client-supplied field names never reach the query builder directly: filter
and sort fields are enums mapped to columns through fixed tables.
"""

from sqlalchemy.orm import Session

from recipebox.models.enums import DifficultyLevel, FilterField, SortField, SortOrder
from recipebox.models.recipe import Recipe

FILTER_COLUMNS = {
    FilterField.NAME: Recipe.name,
    FilterField.CUISINE: Recipe.cuisine,
    FilterField.DIFFICULTY_LEVEL: Recipe.difficulty_level,
}

SORT_COLUMNS = {
    SortField.NAME: Recipe.name,
    SortField.LIKES: Recipe.likes,
    SortField.REVIEWS: Recipe.reviews,
    SortField.TOTAL_PREP_TIME: Recipe.total_prep_time,
    SortField.CREATED_AT: Recipe.created_at,
}


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class RecipeSearchService:
    """Read-only queries over recipes."""

    def __init__(self, db: Session):
        self.db = db

    def all_recipes(self) -> list[Recipe]:
        return self.db.query(Recipe).order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()

    def by_user(self, user_id: int) -> list[Recipe]:
        return (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id)
            .order_by(Recipe.created_at.desc(), Recipe.id.desc())
            .all()
        )

    def distinct_cuisines(self) -> list[str]:
        rows = self.db.query(Recipe.cuisine).distinct().order_by(Recipe.cuisine).all()
        return [cuisine for (cuisine,) in rows]

    def search_by_name(self, name: str) -> list[Recipe]:
        """Case-insensitive substring match on the recipe name."""
        pattern = f"%{_escape_like(name)}%"
        return (
            self.db.query(Recipe)
            .filter(Recipe.name.ilike(pattern, escape="\\"))
            .order_by(Recipe.name)
            .all()
        )

    def by_cuisine(self, cuisine: str) -> list[Recipe]:
        return self.db.query(Recipe).filter(Recipe.cuisine == cuisine).order_by(Recipe.name).all()

    def by_difficulty(self, difficulty_level: DifficultyLevel) -> list[Recipe]:
        return (
            self.db.query(Recipe)
            .filter(Recipe.difficulty_level == difficulty_level.value)
            .order_by(Recipe.name)
            .all()
        )

    def filter_recipes(
        self,
        field: FilterField | None = None,
        value: str | None = None,
        sort_by: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
    ) -> list[Recipe]:
        """Filter on an allowed column (exact match) and sort by an allowed column."""
        query = self.db.query(Recipe)
        if field is not None and value is not None:
            query = query.filter(FILTER_COLUMNS[field] == value)

        sort_column = SORT_COLUMNS[sort_by]
        if order == SortOrder.DESC:
            query = query.order_by(sort_column.desc(), Recipe.id.desc())
        else:
            query = query.order_by(sort_column.asc(), Recipe.id.asc())
        return query.all()
