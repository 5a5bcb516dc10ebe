"""Error kinds raised by services and translated at the request boundary."""

from fastapi import status


class BlogError(Exception):
    """Base class for errors that map to a client-visible response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Server error"
    headers: dict[str, str] | None = None

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidInputError(BlogError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class UnauthorizedError(BlogError):
    """Bad credentials, or a missing, invalid, expired or foreign bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(BlogError):
    """A referenced resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(BlogError):
    """A unique key is already taken.

    Reported as 400 rather than 409 to stay compatible with existing clients.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Conflict"


class ServerError(BlogError):
    """Unexpected storage or crypto failure. The detail is never shown to clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Server error"
