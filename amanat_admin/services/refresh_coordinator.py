"""
Single-flight access token refresh.

When an authenticated call comes back with 401 the coordinator exchanges the
stored refresh token for a new access token. Only one refresh call is ever in
flight: requests that hit 401 while it runs wait in a FIFO queue and are
released, in order, once it settles.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Awaitable, Callable, Deque, Optional

from pydantic import ValidationError

from amanat_admin.clients.dispatcher import RequestContext, RequestDispatcher
from amanat_admin.clients.errors import ApiError, SessionExpiredError
from amanat_admin.clients.token_store import TokenKind, TokenStore
from amanat_admin.schemas import TokenPair

logger = logging.getLogger(__name__)

REFRESH_PATH = "/auth/refresh"

RefreshFunc = Callable[[str], Awaitable[TokenPair]]
SessionEndHandler = Callable[[SessionExpiredError], None]


async def request_token_refresh(dispatcher: RequestDispatcher, refresh_token: str) -> TokenPair:
    """Call the refresh endpoint directly, bypassing the auth interceptor."""
    context = RequestContext(
        method="POST",
        path=REFRESH_PATH,
        body={"refreshToken": refresh_token},
        allow_refresh=False,
    )
    payload = await dispatcher.transmit(context)
    data = payload.get("data") if isinstance(payload, dict) else None
    try:
        return TokenPair.model_validate(data)
    except ValidationError as exc:
        raise ApiError("Refresh response did not contain an access token.", payload=payload) from exc


class RefreshCoordinator:
    """Own the refresh-in-progress flag and the queue of requests waiting on it."""

    def __init__(
        self,
        token_store: TokenStore,
        refresh_tokens: RefreshFunc,
        *,
        on_session_end: Optional[SessionEndHandler] = None,
    ) -> None:
        self._store = token_store
        self._refresh_tokens = refresh_tokens
        self._on_session_end = on_session_end
        self._refreshing = False
        self._pending: Deque["asyncio.Future[str]"] = deque()

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def obtain_access_token(self) -> str:
        """
        Return a new access token for a request that was rejected with 401.

        The first caller performs the refresh; callers arriving while it is
        running are queued and receive the same token (or the same
        ``SessionExpiredError``) when it settles.
        """
        if self._refreshing:
            waiter: asyncio.Future[str] = asyncio.get_running_loop().create_future()
            self._pending.append(waiter)
            logger.debug("Token refresh in progress; %d request(s) waiting", len(self._pending))
            return await waiter

        self._refreshing = True
        try:
            access_token = await self._refresh()
        except SessionExpiredError as exc:
            self._store.clear()
            self._release(error=exc)
            logger.warning("Session ended: %s", exc.message)
            if self._on_session_end is not None:
                self._on_session_end(exc)
            raise
        except BaseException:
            self._release(error=SessionExpiredError("Token refresh was interrupted."))
            raise

        self._release(token=access_token)
        return access_token

    async def _refresh(self) -> str:
        refresh_token = self._store.get(TokenKind.REFRESH)
        if not refresh_token:
            raise SessionExpiredError("No refresh token is stored; sign in again.")

        try:
            tokens = await self._refresh_tokens(refresh_token)
        except ApiError as exc:
            raise SessionExpiredError(
                f"Token refresh failed: {exc.message}",
                status_code=exc.status_code,
                payload=exc.payload,
            ) from exc

        self._store.set(TokenKind.ACCESS, tokens.access_token)
        if tokens.refresh_token:
            self._store.set(TokenKind.REFRESH, tokens.refresh_token)
        logger.info("Access token refreshed")
        return tokens.access_token

    def _release(
        self,
        *,
        token: Optional[str] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        """Return to idle and settle every queued request in arrival order."""
        self._refreshing = False
        pending, self._pending = self._pending, deque()
        while pending:
            waiter = pending.popleft()
            if waiter.done():
                continue
            if error is not None:
                waiter.set_exception(error)
            else:
                waiter.set_result(token)  # type: ignore[arg-type]


__all__ = [
    "REFRESH_PATH",
    "RefreshCoordinator",
    "RefreshFunc",
    "request_token_refresh",
]
