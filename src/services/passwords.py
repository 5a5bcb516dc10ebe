"""Password hashing with salted bcrypt.

bcrypt only reads the first 72 bytes of a password. Request schemas reject
longer passwords so two distinct accepted passwords never share a hash.
"""

from passlib.context import CryptContext

from src.config import get_settings
from src.exceptions import InvalidInputError

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.password_hash_rounds,
)


def get_password_hash(password: str) -> str:
    """Hash a password. Each call uses a fresh salt."""
    if not password:
        raise InvalidInputError("Password is required")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash in constant time."""
    if not plain_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)
