"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_store, get_token_issuer
from src.schemas.auth import TokenResponse, UserLogin, UserRecordResponse, UserSignup
from src.services.auth import authenticate_user, create_user
from src.services.store import CredentialStore
from src.services.tokens import TokenIssuer

router = APIRouter(tags=["auth"])

# Sync handlers: bcrypt runs in the threadpool, off the event loop.


@router.post("/signup", response_model=UserRecordResponse)
def signup(
    user_data: UserSignup,
    store: Annotated[CredentialStore, Depends(get_store)],
):
    """Create a new account and return the stored user record."""
    user = create_user(store, user_data.name, user_data.email, user_data.password)
    return UserRecordResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    store: Annotated[CredentialStore, Depends(get_store)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
):
    """Login with email and password.

    Returns the user's current token while it is still valid, otherwise a new one.
    """
    user = authenticate_user(store, credentials.email, credentials.password)
    token = issuer.issue_or_reuse(store, user)
    return TokenResponse(token=token)
