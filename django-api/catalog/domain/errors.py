"""Domain error codes for the catalog module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    ACCESS_DENIED = "ACCESS_DENIED"
    CONFLICT = "CONFLICT"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: object) -> None:
        super().__init__(f"User with id: {user_id} does not exist.")


class ExperienceNotFoundError(NotFoundError):
    """Raised when an experience is not found."""

    def __init__(self, experience_id: object) -> None:
        super().__init__(f"Experience with id: {experience_id} does not exist.")


class TripNotFoundError(NotFoundError):
    """Raised when a trip is not found."""

    def __init__(self, trip_id: object) -> None:
        super().__init__(f"Trip with id: {trip_id} does not exist.")


class ForbiddenError(DomainError):
    """Raised when the acting user lacks the required role."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class AccessDeniedError(DomainError):
    """Raised when a claim does not grant access to an organiser's resources."""

    def __init__(self, reason: str) -> None:
        super().__init__(code=ErrorCode.ACCESS_DENIED, message=reason)


class ExperienceConflictError(DomainError):
    """Raised when the organiser already has an experience on that UTC day."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CONFLICT,
            message="Organiser already has an experience on this date.",
        )


class UnavailableError(DomainError):
    """Raised when the persistence layer fails."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAVAILABLE,
            message="Storage is unavailable. Please try again later.",
        )
