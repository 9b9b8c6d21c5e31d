"""
Session facade consumed by console collaborators.

Wraps sign-in, sign-out and startup restoration so callers never deal with
tokens directly. ``login`` and ``restore_session`` report failure through their
return value instead of raising, so a UI can show a generic message.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from amanat_admin.clients.dispatcher import RequestDispatcher
from amanat_admin.clients.errors import ApiError, SessionExpiredError
from amanat_admin.clients.token_store import TokenKind, TokenStore
from amanat_admin.schemas import AdminUser, ApiResponse, LoginResult

logger = logging.getLogger(__name__)

SessionExpiredCallback = Callable[[SessionExpiredError], None]


class SessionFacade:
    """Login, logout and current-user state for one console session."""

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        token_store: TokenStore,
        *,
        on_session_expired: Optional[SessionExpiredCallback] = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._store = token_store
        self._on_session_expired = on_session_expired
        self._current_user: Optional[AdminUser] = None
        self._restoring = False

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def get_current_user(self) -> Optional[AdminUser]:
        return self._current_user

    async def login(self, email: str, password: str) -> bool:
        """Sign in and persist the issued tokens; return ``False`` on any failure."""
        try:
            payload = await self._dispatcher.send(
                "POST",
                "/auth/login",
                {"email": email, "password": password},
                allow_refresh=False,
            )
            result = LoginResult.model_validate(ApiResponse.model_validate(payload).data)
        except ApiError as exc:
            logger.info("Login rejected for %s: %s", email, exc.message)
            return False
        except ValidationError:
            logger.warning("Login response for %s was malformed", email)
            return False

        self._store.set(TokenKind.ACCESS, result.access_token)
        if result.refresh_token:
            self._store.set(TokenKind.REFRESH, result.refresh_token)
        self._current_user = result.user
        logger.info("Signed in as %s (%s)", result.user.email, result.user.role)
        return True

    async def logout(self) -> None:
        """Tell the server we are leaving, then drop local state whatever it answered."""
        try:
            await self._dispatcher.send("POST", "/auth/logout", allow_refresh=False)
        except ApiError as exc:
            logger.debug("Ignoring logout failure: %s", exc.message)
        finally:
            self.clear()

    async def restore_session(self) -> Optional[AdminUser]:
        """
        Re-establish the current user from stored tokens at startup.

        This is a passive check: when the stored session cannot be renewed the
        tokens are cleared and ``None`` is returned without invoking
        ``on_session_expired``.
        """
        if not (self._store.get(TokenKind.ACCESS) or self._store.get(TokenKind.REFRESH)):
            return None

        self._restoring = True
        try:
            payload = await self._dispatcher.send("GET", "/auth/me")
            user = ApiResponse.model_validate(payload).data_as(AdminUser)
        except (ApiError, ValidationError) as exc:
            logger.info("Stored session could not be restored: %s", exc)
            self.clear()
            return None
        finally:
            self._restoring = False

        self._current_user = user
        return user

    def clear(self) -> None:
        self._store.clear()
        self._current_user = None

    def handle_session_end(self, error: SessionExpiredError) -> None:
        """Coordinator callback: forget the user and notify, unless a restore is checking."""
        self._current_user = None
        if self._restoring:
            return
        if self._on_session_expired is not None:
            self._on_session_expired(error)


__all__ = ["SessionExpiredCallback", "SessionFacade"]
