"""Like and review API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from recipebox.api.dependencies import get_current_user_id, get_engagement_service
from recipebox.schemas.auth import MessageResponse
from recipebox.schemas.engagement import LikeStatus, ReviewCreate, ReviewResponse, ReviewUpdate
from recipebox.schemas.recipe import RecipeResponse
from recipebox.services.engagement import EngagementService

router = APIRouter(tags=["engagement"])


# --- Likes ---


@router.post("/like/{recipe_id}", response_model=LikeStatus)
def like_recipe(
    recipe_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """Like a recipe."""
    recipe = service.like(user_id, recipe_id)
    return LikeStatus(recipe_id=recipe.id, liked=True, likes=recipe.likes)


@router.delete("/unlike/{recipe_id}", response_model=LikeStatus)
def unlike_recipe(
    recipe_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """Remove a like from a recipe."""
    recipe = service.unlike(user_id, recipe_id)
    return LikeStatus(recipe_id=recipe.id, liked=False, likes=recipe.likes)


@router.get("/liked/{recipe_id}", response_model=LikeStatus)
def get_like_status(
    recipe_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """Check whether the current user likes a recipe."""
    liked = service.is_liked(user_id, recipe_id)
    recipe = service.get_recipe(recipe_id)
    return LikeStatus(recipe_id=recipe.id, liked=liked, likes=recipe.likes)


@router.get("/liked-recipes", response_model=list[RecipeResponse])
def get_liked_recipes(
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """List the recipes the current user likes."""
    recipes = service.liked_recipes(user_id)
    if not recipes:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No liked recipes found")
    return recipes


# --- Reviews ---


@router.get("/reviews/{recipe_id}", response_model=list[ReviewResponse])
def list_reviews(
    recipe_id: int,
    _: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """List the reviews of a recipe, oldest first."""
    return service.list_reviews(recipe_id)


@router.post("/review/{recipe_id}", response_model=ReviewResponse)
def add_review(
    recipe_id: int,
    review_data: ReviewCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """Review a recipe."""
    return service.add_review(user_id, recipe_id, review_data.content)


@router.put("/review/{review_id}", response_model=ReviewResponse)
def edit_review(
    review_id: int,
    review_data: ReviewUpdate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """Replace the content of one of the current user's reviews."""
    return service.edit_review(review_id, user_id, review_data.content)


@router.delete("/review/{review_id}", response_model=MessageResponse)
def delete_review(
    review_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[EngagementService, Depends(get_engagement_service)],
):
    """Delete one of the current user's reviews."""
    service.delete_review(review_id, user_id)
    return MessageResponse(message="Review deleted successfully")
