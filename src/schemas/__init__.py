"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import TokenResponse, UserLogin, UserRecordResponse, UserSignup
from src.schemas.post import PostCreate, PostResponse

__all__ = [
    "UserSignup",
    "UserLogin",
    "TokenResponse",
    "UserRecordResponse",
    "PostCreate",
    "PostResponse",
]
