"""Domain-level errors.

The user store returns these inside a ``Result`` rather than raising them.
Route handlers read ``status_code`` to render the error envelope.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Taxonomy of failures a caller can observe."""
    INVALID_INPUT = 'InvalidInput'
    CONFLICT = 'ConflictError'
    NOT_FOUND = 'NotFoundError'
    UNAUTHORIZED = 'UnauthorizedError'


class DomainError(Exception):
    """Base class for all domain errors."""
    kind: ErrorKind
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input violates a business validation rule."""
    kind = ErrorKind.INVALID_INPUT
    status_code = 400

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(message)
        self.errors = errors or {}


class ConflictError(DomainError):
    """Entity with the same unique key already exists."""
    kind = ErrorKind.CONFLICT
    status_code = 409


class NotFoundError(DomainError):
    """Requested entity does not exist."""
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class PermissionDeniedError(DomainError):
    """Caller lacks permission for the requested action."""
    kind = ErrorKind.UNAUTHORIZED
    status_code = 403
