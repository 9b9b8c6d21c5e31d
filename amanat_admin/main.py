"""
Entry point for building a fully wired admin console client.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Optional

import httpx

from amanat_admin.api.resources import (
    ActivityApi,
    AuthApi,
    CommitteesApi,
    ContributionsApi,
    GalleryApi,
    LandDonorsApi,
    SettingsApi,
    StatisticsApi,
    UploadApi,
    UsersApi,
)
from amanat_admin.clients import RequestDispatcher, TokenStore
from amanat_admin.core.config import AppSettings, get_settings
from amanat_admin.core.logging import configure_logging
from amanat_admin.dependencies import get_request_dispatcher, get_token_store
from amanat_admin.services import (
    AuthInterceptor,
    RefreshCoordinator,
    SessionFacade,
    request_token_refresh,
)
from amanat_admin.services.session import SessionExpiredCallback


class AdminConsole:
    """One authenticated session against the admin API and its resource bindings."""

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        token_store: TokenStore,
        coordinator: RefreshCoordinator,
        session: SessionFacade,
    ) -> None:
        self.dispatcher = dispatcher
        self.token_store = token_store
        self.coordinator = coordinator
        self.session = session

        self.auth = AuthApi(dispatcher)
        self.users = UsersApi(dispatcher)
        self.committees = CommitteesApi(dispatcher)
        self.contributions = ContributionsApi(dispatcher)
        self.land_donors = LandDonorsApi(dispatcher)
        self.gallery = GalleryApi(dispatcher)
        self.settings = SettingsApi(dispatcher)
        self.activity = ActivityApi(dispatcher)
        self.statistics = StatisticsApi(dispatcher)
        self.uploads = UploadApi(dispatcher)

    async def send(self, method: str, path: str, body: Any = None, **options: Any) -> Any:
        return await self.dispatcher.send(method, path, body, **options)

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    async def __aenter__(self) -> "AdminConsole":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_console(
    settings: Optional[AppSettings] = None,
    *,
    token_store: Optional[TokenStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    on_session_expired: Optional[SessionExpiredCallback] = None,
) -> AdminConsole:
    """Factory wiring dispatcher, interceptor, refresh coordinator and session."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = token_store if token_store is not None else get_token_store(settings.storage)
    dispatcher = get_request_dispatcher(settings.api, transport=transport)
    session = SessionFacade(dispatcher, store, on_session_expired=on_session_expired)
    coordinator = RefreshCoordinator(
        store,
        partial(request_token_refresh, dispatcher),
        on_session_end=session.handle_session_end,
    )
    dispatcher.add_interceptor(AuthInterceptor(store, coordinator, dispatcher.dispatch))
    return AdminConsole(dispatcher, store, coordinator, session)


__all__ = ["AdminConsole", "create_console"]
