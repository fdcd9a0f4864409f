"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the accounts service."""

    # Signup errors
    USER_EXISTS = "USER_EXISTS"
    INVALID_USERNAME = "INVALID_USERNAME"
    INVALID_EMAIL = "INVALID_EMAIL"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class SignupError(AppException):
    """Base class for errors reported by the signup workflow."""


class UserExistsError(SignupError):
    """An account with this email already has a profile."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_EXISTS,
            message="A user with this email already exists",
            status_code=409,
            details={"email": email},
        )


class InvalidUsernameError(SignupError):
    """Username does not satisfy the username policy."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_USERNAME,
            message=f"Invalid username: {username}",
            status_code=400,
            details={"username": username},
        )


class InvalidEmailError(SignupError):
    """The confirmation email could not be sent."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_EMAIL,
            message="Unable to send a confirmation email to this address",
            status_code=400,
            details={"email": email},
        )
