"""User profile API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from recipebox.api.dependencies import (
    get_current_user,
    get_current_user_id,
    get_recipe_search_service,
)
from recipebox.database import get_db
from recipebox.models.user import User
from recipebox.schemas.auth import ProfileUpdate, UserProfileResponse, UserResponse
from recipebox.schemas.recipe import RecipeResponse
from recipebox.services.auth import get_user_by_username
from recipebox.services.recipe_search import RecipeSearchService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def get_user_or_404(db: Session, user_id: int) -> User:
    """Get a user by id."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/me", response_model=UserResponse)
def update_profile(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update the current user's profile."""
    update_data = profile_data.model_dump(exclude_unset=True, exclude_none=True)

    new_username = update_data.get("username")
    if new_username and new_username != current_user.username:
        if get_user_by_username(db, new_username):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Username already taken"
            )

    for field, value in update_data.items():
        setattr(current_user, field, value)

    db.commit()
    db.refresh(current_user)
    logger.info(f"User {current_user.id} updated profile fields {sorted(update_data)}")
    return current_user


@router.get("/users/{user_id}", response_model=UserProfileResponse)
def get_user_profile(
    user_id: int,
    _: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a user's public profile."""
    return get_user_or_404(db, user_id)


@router.get("/users/{user_id}/recipes", response_model=list[RecipeResponse])
def get_user_recipes(
    user_id: int,
    _: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    search: Annotated[RecipeSearchService, Depends(get_recipe_search_service)],
):
    """List the recipes a user has authored."""
    get_user_or_404(db, user_id)
    return search.by_user(user_id)
