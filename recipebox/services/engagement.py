"""Engagement service: likes and reviews with their recipe counters.

Each mutation changes a ``likes``/``reviews`` row and the matching
denormalized counter on ``Recipe`` inside a single transaction. The rows are
the source of truth; counters are adjusted with SQL-side expressions so that a
concurrent writer on another pair cannot be overwritten by a stale in-memory
value, and decrements are floored at zero.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy import case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recipebox.models.like import Like
from recipebox.models.recipe import Recipe
from recipebox.models.review import Review

logger = logging.getLogger(__name__)


def _decremented(column):
    """``column - 1`` that never goes below zero."""
    return case((column > 0, column - 1), else_=0)


class EngagementService:
    """Service for like and review operations."""

    def __init__(self, db: Session):
        self.db = db

    # --- Likes ---

    def like(self, user_id: int, recipe_id: int) -> Recipe:
        """Like a recipe and increment its like counter.

        Raises 404 if the recipe does not exist and 400 if the user already
        likes it. Nothing is written in either case.
        """
        recipe = self.get_recipe(recipe_id)

        if self.is_liked(user_id, recipe_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Recipe already liked",
            )

        try:
            self.db.add(Like(user_id=user_id, recipe_id=recipe_id))
            self.db.flush()
            self._adjust_counter(recipe_id, Recipe.likes, Recipe.likes + 1)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # A concurrent like for the same pair committed first
            if self.is_liked(user_id, recipe_id):
                logger.info(f"Concurrent like rejected: user {user_id} recipe {recipe_id}")
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Recipe already liked",
                ) from None
            raise
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(recipe)
        logger.info(f"User {user_id} liked recipe {recipe_id} (likes={recipe.likes})")
        return recipe

    def unlike(self, user_id: int, recipe_id: int) -> Recipe:
        """Remove a like and decrement the like counter, floored at zero.

        Raises 400 if the user does not like the recipe.
        """
        try:
            deleted = (
                self.db.query(Like)
                .filter(Like.user_id == user_id, Like.recipe_id == recipe_id)
                .delete(synchronize_session=False)
            )
            if not deleted:
                self.db.rollback()
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Recipe not liked yet",
                )
            self._adjust_counter(recipe_id, Recipe.likes, _decremented(Recipe.likes))
            self.db.commit()
        except HTTPException:
            raise
        except Exception:
            self.db.rollback()
            raise

        recipe = self.get_recipe(recipe_id)
        logger.info(f"User {user_id} unliked recipe {recipe_id} (likes={recipe.likes})")
        return recipe

    def is_liked(self, user_id: int, recipe_id: int) -> bool:
        """Check whether the user likes the recipe."""
        return (
            self.db.query(Like.id)
            .filter(Like.user_id == user_id, Like.recipe_id == recipe_id)
            .first()
            is not None
        )

    def liked_recipes(self, user_id: int) -> list[Recipe]:
        """Recipes the user likes, most recently liked first."""
        return (
            self.db.query(Recipe)
            .join(Like, Like.recipe_id == Recipe.id)
            .filter(Like.user_id == user_id)
            .order_by(Like.created_at.desc(), Like.id.desc())
            .all()
        )

    # --- Reviews ---

    def add_review(self, user_id: int, recipe_id: int, content: str) -> Review:
        """Add a review and increment the recipe's review counter."""
        content = self._require_content(content)
        self.get_recipe(recipe_id)

        review = Review(user_id=user_id, recipe_id=recipe_id, content=content)
        try:
            self.db.add(review)
            self.db.flush()
            self._adjust_counter(recipe_id, Recipe.reviews, Recipe.reviews + 1)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(review)
        logger.info(f"User {user_id} reviewed recipe {recipe_id} (review {review.id})")
        return review

    def edit_review(self, review_id: int, user_id: int, content: str) -> Review:
        """Replace the content of a review owned by the user."""
        content = self._require_content(content)
        review = self._get_owned_review(review_id, user_id)

        try:
            review.content = content
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(review)
        logger.info(f"User {user_id} edited review {review_id}")
        return review

    def delete_review(self, review_id: int, user_id: int) -> None:
        """Delete a review owned by the user and decrement the review counter."""
        review = self._get_owned_review(
            review_id, user_id, missing_status=status.HTTP_400_BAD_REQUEST
        )
        recipe_id = review.recipe_id

        try:
            deleted = (
                self.db.query(Review)
                .filter(Review.id == review_id)
                .delete(synchronize_session=False)
            )
            if deleted:
                self._adjust_counter(recipe_id, Recipe.reviews, _decremented(Recipe.reviews))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"User {user_id} deleted review {review_id} on recipe {recipe_id}")

    def list_reviews(self, recipe_id: int) -> list[Review]:
        """Reviews of a recipe, oldest first."""
        self.get_recipe(recipe_id)
        return (
            self.db.query(Review)
            .filter(Review.recipe_id == recipe_id)
            .order_by(Review.created_at, Review.id)
            .all()
        )

    # --- Helpers ---

    def get_recipe(self, recipe_id: int) -> Recipe:
        """Get a recipe or raise 404."""
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    def _get_owned_review(
        self, review_id: int, user_id: int, missing_status: int = status.HTTP_404_NOT_FOUND
    ) -> Review:
        review = self.db.query(Review).filter(Review.id == review_id).first()
        if not review:
            raise HTTPException(status_code=missing_status, detail="Review not found")
        if review.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized action")
        return review

    def _adjust_counter(self, recipe_id: int, column, value) -> None:
        self.db.query(Recipe).filter(Recipe.id == recipe_id).update(
            {column: value}, synchronize_session=False
        )

    @staticmethod
    def _require_content(content: str) -> str:
        content = (content or "").strip()
        if not content:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Review content is required",
            )
        return content
