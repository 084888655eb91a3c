"""Like model."""

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from recipebox.database import Base
from recipebox.models.mixins import TimestampMixin


class Like(Base, TimestampMixin):
    """A user liking a recipe. At most one row per (user, recipe)."""

    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_like_user_recipe"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", backref="likes")
    recipe = relationship("Recipe", back_populates="like_rows")
