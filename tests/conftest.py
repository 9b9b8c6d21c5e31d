"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import asyncio
import json
from typing import Callable, Optional

import httpx
import pytest

from amanat_admin.clients import MemoryTokenStore, TokenStore
from amanat_admin.core.config import ApiSettings, AppSettings, TokenStorageSettings
from amanat_admin.main import AdminConsole, create_console

BASE_URL = "http://testserver/api"


class FakeAdminApi:
    """``httpx.MockTransport`` handler emulating the admin API's auth behaviour."""

    def __init__(self) -> None:
        self.valid_tokens: set[str] = {"access-1"}
        self.refresh_tokens: dict[str, tuple[str, Optional[str]]] = {
            "refresh-1": ("access-2", None),
        }
        self.refresh_status = 200
        self.refresh_gate: Optional[asyncio.Event] = None
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []
        self.refresh_calls = 0

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.path == f"/api{path}"]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")

        if path == "/auth/refresh":
            return await self._refresh(request)

        override = self.routes.get((request.method, path))
        if override is not None:
            return httpx.Response(
                override.status_code, content=override.content, headers=override.headers
            )

        token = request.headers.get("authorization", "").removeprefix("Bearer ")
        if token not in self.valid_tokens:
            return httpx.Response(
                401, json={"success": False, "message": "Invalid or expired token"}
            )
        return httpx.Response(
            200,
            json={"success": True, "message": "OK", "data": {"path": path, "token": token}},
        )

    async def _refresh(self, request: httpx.Request) -> httpx.Response:
        self.refresh_calls += 1
        if self.refresh_gate is not None:
            await self.refresh_gate.wait()
        if self.refresh_status != 200:
            return httpx.Response(
                self.refresh_status,
                json={"success": False, "message": "Refresh token revoked"},
            )
        refresh_token = json.loads(request.content).get("refreshToken")
        issued = self.refresh_tokens.get(refresh_token)
        if issued is None:
            return httpx.Response(
                401, json={"success": False, "message": "Unknown refresh token"}
            )
        access_token, rotated = issued
        self.valid_tokens.add(access_token)
        data = {"accessToken": access_token}
        if rotated:
            data["refreshToken"] = rotated
        return httpx.Response(200, json={"success": True, "message": "Refreshed", "data": data})


def build_settings(base_url: str = BASE_URL) -> AppSettings:
    return AppSettings(
        log_level="DEBUG",
        api=ApiSettings(base_url=base_url),
        storage=TokenStorageSettings(backend="memory"),
    )


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def fake_api() -> FakeAdminApi:
    return FakeAdminApi()


@pytest.fixture
def make_console() -> Callable[..., AdminConsole]:
    def _make(
        transport: httpx.AsyncBaseTransport,
        *,
        token_store: Optional[TokenStore] = None,
        on_session_expired=None,
    ) -> AdminConsole:
        return create_console(
            build_settings(),
            token_store=token_store if token_store is not None else MemoryTokenStore(),
            transport=transport,
            on_session_expired=on_session_expired,
        )

    return _make


@pytest.fixture
def wait_until():
    async def _wait(predicate: Callable[[], bool], *, attempts: int = 200) -> None:
        for _ in range(attempts):
            if predicate():
                return
            await asyncio.sleep(0)
        raise AssertionError("condition was not reached")

    return _wait
