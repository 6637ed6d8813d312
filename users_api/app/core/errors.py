"""
Error vocabulary of the Users API.

Every failure response has the body ``{"message": <text>}`` where the
text is one of the :class:`ErrorMessage` values.  Endpoints raise
:class:`ApiError`; the exception handlers installed by ``main`` render
it (and the framework's own 404/405 errors) into that envelope.
"""

from enum import Enum

from fastapi import HTTPException, status


class ErrorMessage(str, Enum):
    INVALID_INPUT = "Invalid input"
    INVALID_USER_ID = "Invalid user ID"
    USER_NOT_FOUND = "User not found"
    ENDPOINT_NOT_FOUND = "Endpoint not found"
    METHOD_NOT_ALLOWED = "Method not allowed"
    INTERNAL_SERVER_ERROR = "Internal server error"


class ApiError(HTTPException):
    """HTTP error whose detail is drawn from :class:`ErrorMessage`."""

    def __init__(self, status_code: int, message: ErrorMessage) -> None:
        super().__init__(status_code=status_code, detail=message.value)
        self.message = message


# Messages used when Starlette itself raises (unknown path, wrong method).
DEFAULT_MESSAGES = {
    status.HTTP_404_NOT_FOUND: ErrorMessage.ENDPOINT_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorMessage.METHOD_NOT_ALLOWED,
}


def invalid_input() -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, ErrorMessage.INVALID_INPUT)


def invalid_user_id() -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, ErrorMessage.INVALID_USER_ID)


def user_not_found() -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, ErrorMessage.USER_NOT_FOUND)


def method_not_allowed() -> ApiError:
    return ApiError(status.HTTP_405_METHOD_NOT_ALLOWED, ErrorMessage.METHOD_NOT_ALLOWED)
