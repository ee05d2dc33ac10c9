"""User model."""

from sqlalchemy import Column, Integer, String

from src.database import Base


class User(Base):
    """Account that can sign in and mint tokens."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash, never the plain text
