"""FastAPI dependencies for settings, authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from recipebox.config import Settings
from recipebox.database import get_db
from recipebox.models.user import User
from recipebox.services.auth import decode_access_token
from recipebox.services.engagement import EngagementService
from recipebox.services.recipe_search import RecipeSearchService


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_current_user_id(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> int:
    """Resolve the credential cookie to a user id without touching the database."""
    token = request.cookies.get(settings.cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
        )

    payload = decode_access_token(token, settings)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Failed to authenticate token",
        )

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Failed to authenticate token",
        )

    return int(user_id)


def get_current_user(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the credential cookie."""
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_engagement_service(
    db: Annotated[Session, Depends(get_db)],
) -> EngagementService:
    """Get engagement service with dependencies."""
    return EngagementService(db)


def get_recipe_search_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeSearchService:
    """Get recipe search service with dependencies."""
    return RecipeSearchService(db)
