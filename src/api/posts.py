"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_store, get_target_user
from src.models.user import User
from src.schemas.post import PostCreate, PostResponse
from src.services.store import CredentialStore

router = APIRouter(prefix="/users/{user_id}/posts", tags=["posts"])


@router.post("", response_model=PostResponse)
async def create_post(
    post_data: PostCreate,
    author: Annotated[User, Depends(get_target_user)],
    store: Annotated[CredentialStore, Depends(get_store)],
):
    """Create a post for the authenticated user."""
    return store.create_post(post_data.title, post_data.content, author.id)


@router.get("", response_model=list[PostResponse])
async def get_posts(
    author: Annotated[User, Depends(get_target_user)],
    store: Annotated[CredentialStore, Depends(get_store)],
):
    """Get all posts of the authenticated user."""
    return store.list_posts_by_owner(author.id)
