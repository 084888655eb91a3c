"""User model."""

from sqlalchemy import Column, Integer, String, Text

from recipebox.database import Base
from recipebox.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    profile_picture_url = Column(String(2048), nullable=False)
    about_me = Column(Text, nullable=False)
