"""Application error taxonomy.

Every failure a handler can surface is one of the ``AppError`` variants
below. Each variant carries a fixed ``ErrorKind``; the HTTP status for a
kind lives in ``STATUS_CODES`` and is translated to a response by the
exception handlers registered in ``src.main``.
"""

from enum import Enum
from http import HTTPStatus
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of error kinds."""

    VALIDATION = "validation_error"
    AUTH = "auth_error"
    NOT_FOUND = "not_found"
    INTEGRITY = "integrity_error"
    CONFLICT = "conflict"
    SERVER_MISCONFIGURED = "server_misconfigured"
    STORE = "store_error"


# 411 is what existing clients expect for "not found" and "already exists"
STATUS_CODES: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.AUTH: HTTPStatus.FORBIDDEN,
    ErrorKind.NOT_FOUND: HTTPStatus.LENGTH_REQUIRED,
    ErrorKind.INTEGRITY: HTTPStatus.LENGTH_REQUIRED,
    ErrorKind.CONFLICT: HTTPStatus.LENGTH_REQUIRED,
    ErrorKind.SERVER_MISCONFIGURED: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.STORE: HTTPStatus.INTERNAL_SERVER_ERROR,
}

_missing = set(ErrorKind) - set(STATUS_CODES)
if _missing:
    raise RuntimeError(f"No HTTP status mapped for error kinds: {sorted(_missing)}")


class AppError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return int(STATUS_CODES[self.kind])

    @property
    def exposes_details(self) -> bool:
        """Server-side failures hide their message outside development."""
        return STATUS_CODES[self.kind] < HTTPStatus.INTERNAL_SERVER_ERROR


class ValidationError(AppError):
    """Missing or malformed input."""

    kind = ErrorKind.VALIDATION
    default_message = "Validation error"


class AuthError(AppError):
    """Missing or rejected credentials."""

    kind = ErrorKind.AUTH
    default_message = "You are not logged in"


class InvalidTokenError(AuthError):
    """Token signature, structure or expiry did not validate."""

    default_message = "Invalid token"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Sorry incorrect input"


class DataIntegrityError(AppError):
    """Stored rows reference something that no longer exists."""

    kind = ErrorKind.INTEGRITY
    default_message = "user not found, error should ideally not happen"


class UserExistsError(AppError):
    kind = ErrorKind.CONFLICT
    default_message = "User already exists"


class ServerMisconfiguredError(AppError):
    """The server cannot operate with its current configuration."""

    kind = ErrorKind.SERVER_MISCONFIGURED
    default_message = "Server misconfigured"


class StoreError(AppError):
    """Underlying persistence failure."""

    kind = ErrorKind.STORE
    default_message = "Internal server error"
