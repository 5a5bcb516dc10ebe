"""Account signup and credential checks."""

import logging

from src.exceptions import UnauthorizedError
from src.models.user import User
from src.services.passwords import get_password_hash, verify_password
from src.services.store import CredentialStore

logger = logging.getLogger(__name__)


def create_user(store: CredentialStore, name: str, email: str, password: str) -> User:
    """Create a new user with a hashed password."""
    hashed_password = get_password_hash(password)
    user = store.create_user(name=name, email=email, password_hash=hashed_password)
    logger.info(f"Created user {user.id}")
    return user


def authenticate_user(store: CredentialStore, email: str, password: str) -> User:
    """Authenticate a user by email and password."""
    user = store.find_user_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        raise UnauthorizedError("Invalid credentials")
    return user
