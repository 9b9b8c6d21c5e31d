"""Attach bearer tokens to outgoing calls and recover from expired ones."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from amanat_admin.clients.dispatcher import RequestContext
from amanat_admin.clients.errors import ApiError
from amanat_admin.clients.token_store import TokenKind, TokenStore
from amanat_admin.services.refresh_coordinator import RefreshCoordinator

logger = logging.getLogger(__name__)

ReplayFunc = Callable[[RequestContext], Awaitable[Any]]


class AuthInterceptor:
    """Dispatcher interceptor implementing bearer auth with refresh-and-retry-once."""

    def __init__(
        self,
        token_store: TokenStore,
        coordinator: RefreshCoordinator,
        replay: ReplayFunc,
    ) -> None:
        self._store = token_store
        self._coordinator = coordinator
        self._replay = replay

    def on_request(self, context: RequestContext) -> RequestContext:
        token = self._store.get(TokenKind.ACCESS)
        if token:
            return context.with_bearer(token)
        return context

    async def on_error(self, context: RequestContext, error: ApiError) -> Any:
        if not self._should_refresh(context, error):
            logger.warning(
                "API error on %s %s: %s", context.method, context.path, error.message
            )
            raise error

        retry_context = context.mark_retried()
        access_token = await self._coordinator.obtain_access_token()
        logger.debug("Replaying %s %s with refreshed token", context.method, context.path)
        return await self._replay(retry_context.with_bearer(access_token))

    @staticmethod
    def _should_refresh(context: RequestContext, error: ApiError) -> bool:
        return error.status_code == 401 and context.allow_refresh and not context.retried


__all__ = ["AuthInterceptor"]
