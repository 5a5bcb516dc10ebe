"""Ownership checks for user-scoped resources."""

from src.exceptions import NotFoundError, UnauthorizedError
from src.models.user import User
from src.services.store import CredentialStore
from src.services.tokens import TokenClaims


def authorize_owner(subject_id: int, owner_id: int) -> None:
    """Allow only when the authenticated subject owns the resource."""
    if subject_id != owner_id:
        raise UnauthorizedError()


def get_owned_user(store: CredentialStore, claims: TokenClaims, user_id: int) -> User:
    """Look up the target user, then require that the token subject is that user.

    A missing user is reported as ``NotFoundError`` before ownership is checked.
    """
    user = store.find_user_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    authorize_owner(claims.user_id, user.id)
    return user
