"""Recipe API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from recipebox.api.dependencies import get_current_user_id, get_recipe_search_service
from recipebox.database import get_db
from recipebox.models.enums import DifficultyLevel, FilterField, SortField, SortOrder
from recipebox.models.recipe import Recipe
from recipebox.schemas.auth import MessageResponse
from recipebox.schemas.recipe import (
    CuisineListResponse,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)
from recipebox.services.recipe_search import RecipeSearchService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recipes"])


def get_recipe_or_404(db: Session, recipe_id: int) -> Recipe:
    """Get a recipe by id."""
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id).first()
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


def get_owned_recipe(db: Session, recipe_id: int, user_id: int) -> Recipe:
    """Get a recipe the user is allowed to modify."""
    recipe = get_recipe_or_404(db, recipe_id)
    if recipe.user_id != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized action")
    return recipe


def require_results(recipes: list[Recipe], detail: str) -> list[Recipe]:
    """Searches report an empty result as 404."""
    if not recipes:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return recipes


@router.post("/recipe", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe_data: RecipeCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new recipe owned by the current user."""
    recipe = Recipe(user_id=user_id, **recipe_data.model_dump())
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    logger.info(f"User {user_id} created recipe {recipe.id}")
    return recipe


@router.get("/recipes", response_model=list[RecipeResponse])
def list_recipes(
    _: Annotated[int, Depends(get_current_user_id)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
):
    """List all recipes, newest first."""
    return search.all_recipes()


# --- Static /recipes/* routes ---


@router.get("/recipes/search", response_model=list[RecipeResponse])
def search_recipes_by_name(
    _: Annotated[int, Depends(get_current_user_id)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
    name: Annotated[str, Query(min_length=1, max_length=255)],
):
    """Search recipes whose name contains the given text."""
    return require_results(search.search_by_name(name), f"No recipes found with name: {name}")


@router.get("/recipes/by-cuisine", response_model=list[RecipeResponse])
def search_recipes_by_cuisine(
    _: Annotated[int, Depends(get_current_user_id)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
    cuisine: Annotated[str, Query(min_length=1, max_length=100)],
):
    """List recipes of a cuisine."""
    return require_results(
        search.by_cuisine(cuisine), f"No recipes found for cuisine: {cuisine}"
    )


@router.get("/recipes/by-difficulty", response_model=list[RecipeResponse])
def search_recipes_by_difficulty(
    _: Annotated[int, Depends(get_current_user_id)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
    difficulty_level: DifficultyLevel,
):
    """List recipes of a difficulty level (easy, medium or hard)."""
    return require_results(
        search.by_difficulty(difficulty_level),
        f"No recipes found for difficulty level: {difficulty_level.value}",
    )


@router.get("/recipes/filter", response_model=list[RecipeResponse])
def filter_recipes(
    _: Annotated[int, Depends(get_current_user_id)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
    field: FilterField | None = None,
    value: Annotated[str | None, Query(min_length=1, max_length=255)] = None,
    sort_by: SortField = SortField.CREATED_AT,
    order: SortOrder = SortOrder.DESC,
):
    """Filter and sort recipes on an allow-listed set of columns."""
    if (field is None) != (value is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="field and value must be given together",
        )
    return search.filter_recipes(field=field, value=value, sort_by=sort_by, order=order)


@router.get("/cuisines", response_model=CuisineListResponse)
def list_cuisines(
    _: Annotated[int, Depends(get_current_user_id)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
):
    """List the distinct cuisines across all recipes."""
    cuisines = search.distinct_cuisines()
    if not cuisines:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No cuisines found")
    return CuisineListResponse(cuisines=cuisines)


# --- Single recipe routes ---


@router.get("/recipe/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    _: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific recipe."""
    return get_recipe_or_404(db, recipe_id)


@router.put("/recipe/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update recipe fields. Only the author may edit."""
    recipe = get_owned_recipe(db, recipe_id, user_id)

    update_data = recipe_data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(recipe, field, value)

    db.commit()
    db.refresh(recipe)
    logger.info(f"User {user_id} updated recipe {recipe_id}")
    return recipe


@router.delete("/recipe/{recipe_id}", response_model=MessageResponse)
def delete_recipe(
    recipe_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a recipe with its likes and reviews. Only the author may delete."""
    recipe = get_owned_recipe(db, recipe_id, user_id)
    db.delete(recipe)
    db.commit()
    logger.info(f"User {user_id} deleted recipe {recipe_id}")
    return MessageResponse(message="Recipe deleted successfully")
