"""
Factory functions that turn settings into the console's shared clients.

Unlike the settings themselves these are not cached: every console gets its
own token store and dispatcher, so two sessions never share refresh state.
"""

from typing import Optional

import httpx

from amanat_admin.clients import (
    MemoryTokenStore,
    NullTokenStore,
    RequestDispatcher,
    SQLiteTokenStore,
    TokenCipher,
    TokenKind,
    TokenStore,
)
from amanat_admin.core.config import ApiSettings, TokenStorageSettings


def get_token_cipher(settings: TokenStorageSettings) -> Optional[TokenCipher]:
    """Provide the at-rest cipher when an encryption secret is configured."""
    if not settings.encryption_secret:
        return None
    return TokenCipher(secret=settings.encryption_secret)


def get_token_store(settings: TokenStorageSettings) -> TokenStore:
    """Build the token store selected by ``settings.backend``."""
    keys = {
        TokenKind.ACCESS: settings.access_key,
        TokenKind.REFRESH: settings.refresh_key,
    }
    if settings.backend == "memory":
        return MemoryTokenStore(keys)
    if settings.backend == "none":
        return NullTokenStore(keys)
    return SQLiteTokenStore(settings.db_path, cipher=get_token_cipher(settings), keys=keys)


def get_request_dispatcher(
    settings: ApiSettings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RequestDispatcher:
    """Provide a dispatcher bound to the configured API base URL."""
    return RequestDispatcher(settings, transport=transport)


__all__ = ["get_request_dispatcher", "get_token_cipher", "get_token_store"]
