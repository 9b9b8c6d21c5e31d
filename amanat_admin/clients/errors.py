"""Typed errors raised by the admin API client."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    """Base error for any failed admin API call."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class TransportError(ApiError):
    """Raised when the request never produced an HTTP response (network, timeout)."""


class ApiStatusError(ApiError):
    """Raised when the API answers with a non-2xx status code."""


class UnauthorizedError(ApiStatusError):
    """Raised for 401 responses that could not be recovered by a token refresh."""


class SessionExpiredError(ApiError):
    """Raised when the session cannot be renewed and the user must sign in again."""


def error_for_status(status_code: int, payload: Any) -> ApiStatusError:
    """Build the typed error for an HTTP error response."""
    message = None
    if isinstance(payload, dict):
        server_message = payload.get("message")
        if isinstance(server_message, str) and server_message:
            message = server_message
    if message is None:
        message = f"Request failed with status code {status_code}"

    error_cls = UnauthorizedError if status_code == 401 else ApiStatusError
    return error_cls(message, status_code=status_code, payload=payload)


__all__ = [
    "ApiError",
    "ApiStatusError",
    "SessionExpiredError",
    "TransportError",
    "UnauthorizedError",
    "error_for_status",
]
