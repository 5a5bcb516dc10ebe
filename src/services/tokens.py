"""JWT bearer token issuance and verification.

Tokens are HS256-signed JWTs carrying the user id (``sub``), the user's
email and an absolute expiry. The most recent token is also stored on the
user row so that a repeat login inside the validity window returns the same
string instead of minting a new one.

The reuse check is a plain read followed by a conditional write. Two
concurrent logins for a user whose token has expired can both mint, and
whichever commits last is the token stored on the row. Both tokens stay
valid until their own expiry since verification never consults the store.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from jose import JWTError, jwt

from src.config import Settings
from src.models.user import User

if TYPE_CHECKING:
    from src.services.store import CredentialStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a verified token."""

    user_id: int
    email: str
    expires_at: datetime


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps (SQLite drops tzinfo)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class TokenIssuer:
    """Mints signed tokens and decides when a stored token can be reused."""

    def __init__(self, settings: Settings) -> None:
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.lifetime = timedelta(minutes=settings.jwt_expiration_minutes)

    def mint(self, user_id: int, email: str, now: datetime | None = None) -> tuple[str, datetime]:
        """Create a new token and return it with its absolute expiry."""
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + self.lifetime
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
            "jti": uuid.uuid4().hex,
        }
        encoded_jwt = jwt.encode(to_encode, self.secret, algorithm=self.algorithm)
        return encoded_jwt, expires_at

    def issue_or_reuse(
        self,
        store: "CredentialStore",
        user: User,
        now: datetime | None = None,
    ) -> str:
        """Return the user's stored token while it is unexpired, otherwise mint and persist one.

        Raises ``ServerError`` (from the store) when the new token cannot be saved;
        no token is returned in that case.
        """
        now = now or datetime.now(UTC)
        expiration = as_utc(user.token_expiration)
        if user.token and expiration is not None and expiration > now:
            logger.debug(f"Reusing token for user {user.id} (expires {expiration.isoformat()})")
            return user.token

        token, expires_at = self.mint(user.id, user.email, now=now)
        store.update_user_token(user.id, token, expires_at)
        logger.info(f"Issued new token for user {user.id} (expires {expires_at.isoformat()})")
        return token


class TokenVerifier:
    """Checks token signature and expiry without touching the store."""

    def __init__(self, settings: Settings) -> None:
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm

    def verify(self, token: str) -> TokenClaims | None:
        """Decode and validate a token. Returns None for any invalid token."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected bearer token: {e}")
            return None

        email = payload.get("email")
        exp = payload.get("exp")
        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError):
            return None
        if not email or exp is None:
            return None

        return TokenClaims(
            user_id=user_id,
            email=email,
            expires_at=datetime.fromtimestamp(exp, tz=UTC),
        )
