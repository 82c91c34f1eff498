"""
Errors raised by the HTTP transport.

The resource operations never raise these themselves; they surface whatever
the transport raised, unchanged.
"""

from typing import Optional

import requests


class ParcelError(Exception):
    """An error response from the API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[requests.Response] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class NotFoundError(ParcelError):
    pass


class AuthorizationError(ParcelError):
    pass


class ValidationError(ParcelError):
    pass


_STATUS_ERRORS = {
    400: ValidationError,
    401: AuthorizationError,
    403: AuthorizationError,
    404: NotFoundError,
    422: ValidationError,
}


def error_for_status(status_code: int):
    return _STATUS_ERRORS.get(status_code, ParcelError)
