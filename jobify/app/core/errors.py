"""
Application errors. Each carries a fixed HTTP status and a client-facing message;
main.py renders them as {"msg": ...}.
"""
from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(BadRequestError):
    """Missing or empty required field on create/update."""


class DemoUserError(BadRequestError):
    """Write attempted by the read-only demo account."""

    def __init__(self, message: str = "Test User. Read Only!"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Authentication invalid"):
        super().__init__(message)
