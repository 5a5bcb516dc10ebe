"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.exceptions import UnauthorizedError
from src.models.user import User
from src.services.authorization import get_owned_user
from src.services.store import CredentialStore
from src.services.tokens import TokenClaims, TokenIssuer, TokenVerifier

# Missing or malformed headers are turned into UnauthorizedError below
security = HTTPBearer(auto_error=False)


def get_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    """Get the credential store bound to the request's session."""
    return CredentialStore(db)


def get_token_issuer(settings: Annotated[Settings, Depends(get_settings)]) -> TokenIssuer:
    """Get a token issuer configured with the signing secret."""
    return TokenIssuer(settings)


def get_token_verifier(settings: Annotated[Settings, Depends(get_settings)]) -> TokenVerifier:
    """Get a token verifier configured with the signing secret."""
    return TokenVerifier(settings)


def get_current_subject(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
) -> TokenClaims:
    """Get the identity asserted by the request's bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    claims = verifier.verify(credentials.credentials)
    if claims is None:
        raise UnauthorizedError()

    return claims


def get_target_user(
    user_id: int,
    subject: Annotated[TokenClaims, Depends(get_current_subject)],
    store: Annotated[CredentialStore, Depends(get_store)],
) -> User:
    """Get the user named in the path, provided the token subject owns it."""
    return get_owned_user(store, subject, user_id)
