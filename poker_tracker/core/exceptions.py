"""Custom exception classes for consistent error handling across the application."""

from dataclasses import dataclass, field
from typing import ClassVar

# Shared type alias for error detail values
type ErrorDetails = dict[
    str, str | int | float | bool | list[str] | list[dict[str, str | int]] | None
]


@dataclass
class AppError(Exception):
    """Base exception for all application errors.

    ``status_code`` is the HTTP status the API answers with.
    """

    status_code: ClassVar[int] = 400
    code: str = "app_error"
    message: str = "An application error occurred"
    details: ErrorDetails = field(default_factory=dict)

    def __str__(self) -> str:  # pyright: ignore[reportImplicitOverride]
        return self.message


@dataclass
class NotFoundError(AppError):
    """Raised when a session, player or table rating does not exist."""

    status_code: ClassVar[int] = 404
    code: str = "not_found"
    message: str = "Resource not found"


@dataclass
class ValidationError(AppError):
    """Raised when a form is submitted without its required fields."""

    status_code: ClassVar[int] = 422
    code: str = "validation_error"
    message: str = "Validation failed"


@dataclass
class ConflictError(AppError):
    """Raised when an operation conflicts with the current state."""

    status_code: ClassVar[int] = 409
    code: str = "conflict"
    message: str = "Resource conflict"


@dataclass
class ConfirmationRequiredError(ConflictError):
    """Raised when a destructive action is requested without confirmation."""

    code: str = "confirmation_required"
    message: str = "This action must be confirmed"
