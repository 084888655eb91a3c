"""Review model."""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from recipebox.database import Base
from recipebox.models.mixins import TimestampMixin


class Review(Base, TimestampMixin):
    """Free-text review of a recipe, owned by its author."""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)

    # Relationships
    user = relationship("User", backref="reviews")
    recipe = relationship("Recipe", back_populates="review_rows")
