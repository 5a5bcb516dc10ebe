"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def check_password_length(password: str) -> str:
    """Reject passwords bcrypt would silently truncate."""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


class UserSignup(BaseModel):
    """Account creation request. The email is stored exactly as given."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_length(value)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_length(value)


class TokenResponse(BaseModel):
    """Bearer token returned by login."""

    token: str


class UserRecordResponse(BaseModel):
    """Stored user record as returned by signup.

    ``password`` carries the stored bcrypt hash, never the plaintext.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    email: str
    password: str = Field(validation_alias="password_hash")
    token: str | None
    token_expiration: datetime | None
    created_at: datetime
