"""Service layer exports."""

from .auth_interceptor import AuthInterceptor
from .refresh_coordinator import RefreshCoordinator, request_token_refresh
from .session import SessionFacade

__all__ = [
    "AuthInterceptor",
    "RefreshCoordinator",
    "SessionFacade",
    "request_token_refresh",
]
