"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recipebox.api.dependencies import get_app_settings, get_current_user
from recipebox.config import Settings
from recipebox.database import get_db
from recipebox.models.user import User
from recipebox.schemas.auth import AuthResponse, MessageResponse, UserLogin, UserResponse, UserSignup
from recipebox.services.auth import (
    create_access_token,
    create_user,
    get_user_by_email,
    get_user_by_username,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def set_auth_cookie(response: Response, user: User, settings: Settings) -> None:
    """Issue a token for the user and store it in the HTTP-only credential cookie."""
    response.set_cookie(
        key=settings.cookie_name,
        value=create_access_token(user.id, settings),
        max_age=settings.jwt_expiration_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserSignup,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Register a new user and log them in."""
    if get_user_by_email(db, user_data.email):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User already exists")

    if get_user_by_username(db, user_data.username):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Username already taken")

    try:
        user = create_user(db, user_data.username, user_data.email, user_data.password, settings)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email or username
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="User already exists"
        ) from None

    set_auth_cookie(response, user, settings)
    return AuthResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Login with email and password."""
    user = get_user_by_email(db, credentials.email)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No such user with given email",
        )

    if not verify_password(credentials.password, user.password_hash):
        logger.info(f"Wrong password for user {user.id}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Wrong password")

    set_auth_cookie(response, user, settings)
    logger.info(f"User {user.id} logged in")
    return AuthResponse(
        message="User logged in successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Clear the credential cookie."""
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return MessageResponse(message="User logged out successfully")


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
