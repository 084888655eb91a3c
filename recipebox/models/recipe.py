"""Recipe model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from recipebox.database import Base
from recipebox.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe authored by a user.

    ``likes`` and ``reviews`` are denormalized counts of the rows in the
    ``likes`` and ``reviews`` tables for this recipe. They are only changed by
    ``EngagementService`` in the same transaction as the rows themselves.
    """

    __tablename__ = "recipes"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_recipes_likes_non_negative"),
        CheckConstraint("reviews >= 0", name="ck_recipes_reviews_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    cuisine = Column(String(100), nullable=False, index=True)
    ingredients = Column(Text, nullable=False)
    instructions = Column(Text, nullable=False)
    recipe_picture_url = Column(String(2048), nullable=False)
    total_prep_time = Column(Integer, nullable=False)  # minutes
    difficulty_level = Column(String(50), nullable=False)
    notes = Column(Text, nullable=False)
    likes = Column(Integer, nullable=False, default=0, server_default="0")
    reviews = Column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    user = relationship("User", backref="recipes")
    like_rows = relationship("Like", back_populates="recipe", cascade="all, delete-orphan")
    review_rows = relationship("Review", back_populates="recipe", cascade="all, delete-orphan")
