"""Expose the HTTP dispatcher, token storage and error types."""

from .dispatcher import RequestContext, RequestDispatcher
from .errors import (
    ApiError,
    ApiStatusError,
    SessionExpiredError,
    TransportError,
    UnauthorizedError,
)
from .token_cipher import TokenCipher
from .token_store import (
    MemoryTokenStore,
    NullTokenStore,
    SQLiteTokenStore,
    TokenKind,
    TokenStore,
)

__all__ = [
    "ApiError",
    "ApiStatusError",
    "MemoryTokenStore",
    "NullTokenStore",
    "RequestContext",
    "RequestDispatcher",
    "SQLiteTokenStore",
    "SessionExpiredError",
    "TokenCipher",
    "TokenKind",
    "TokenStore",
    "TransportError",
    "UnauthorizedError",
]
