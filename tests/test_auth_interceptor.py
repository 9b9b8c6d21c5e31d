try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from amanat_admin.clients import (
    ApiStatusError,
    NullTokenStore,
    RequestContext,
    TokenKind,
    UnauthorizedError,
)
from amanat_admin.services import AuthInterceptor


class StubCoordinator:
    def __init__(self, token: str = "fresh") -> None:
        self.token = token
        self.calls = 0

    async def obtain_access_token(self) -> str:
        self.calls += 1
        return self.token


@pytest.mark.asyncio
async def test_bearer_token_attached_when_stored(fake_api, make_console) -> None:
    console = make_console(fake_api.transport())
    console.token_store.set(TokenKind.ACCESS, "access-1")

    await console.send("GET", "/committees")

    (request,) = fake_api.requests
    assert request.headers["authorization"] == "Bearer access-1"
    await console.aclose()


@pytest.mark.asyncio
async def test_no_authorization_header_without_token(fake_api, make_console) -> None:
    fake_api.routes[("GET", "/settings")] = httpx.Response(
        200, json={"success": True, "message": "OK", "data": {}}
    )
    console = make_console(fake_api.transport())

    await console.send("GET", "/settings")

    (request,) = fake_api.requests
    assert "authorization" not in request.headers
    await console.aclose()


@pytest.mark.asyncio
async def test_non_401_errors_pass_through_unchanged(fake_api, make_console) -> None:
    fake_api.routes[("DELETE", "/land-donors/7")] = httpx.Response(
        403, json={"success": False, "message": "Only super admins may delete donors"}
    )
    console = make_console(fake_api.transport())
    console.token_store.set(TokenKind.ACCESS, "access-1")
    console.token_store.set(TokenKind.REFRESH, "refresh-1")

    with pytest.raises(ApiStatusError) as excinfo:
        await console.send("DELETE", "/land-donors/7")

    assert excinfo.value.status_code == 403
    assert excinfo.value.message == "Only super admins may delete donors"
    assert fake_api.refresh_calls == 0
    assert console.token_store.get(TokenKind.ACCESS) == "access-1"
    await console.aclose()


@pytest.mark.asyncio
async def test_401_without_refresh_permission_is_reported_directly(
    fake_api, make_console
) -> None:
    console = make_console(fake_api.transport())
    console.token_store.set(TokenKind.REFRESH, "refresh-1")

    with pytest.raises(UnauthorizedError):
        await console.send("GET", "/auth/me", allow_refresh=False)

    assert fake_api.refresh_calls == 0
    assert console.token_store.get(TokenKind.REFRESH) == "refresh-1"
    await console.aclose()


@pytest.mark.asyncio
async def test_replay_carries_refreshed_token_and_retry_marker() -> None:
    replayed: list[RequestContext] = []

    async def replay(context: RequestContext) -> dict:
        replayed.append(context)
        return {"success": True}

    coordinator = StubCoordinator()
    interceptor = AuthInterceptor(NullTokenStore(), coordinator, replay)
    original = RequestContext(method="GET", path="/activity", headers={"X-Trace": "1"})
    error = UnauthorizedError("expired", status_code=401)

    result = await interceptor.on_error(original, error)

    assert result == {"success": True}
    assert coordinator.calls == 1
    (context,) = replayed
    assert context.retried is True
    assert context.headers["Authorization"] == "Bearer fresh"
    assert context.headers["X-Trace"] == "1"
    assert original.retried is False
    assert "Authorization" not in original.headers


@pytest.mark.asyncio
async def test_already_retried_context_is_not_refreshed_again() -> None:
    async def replay(context: RequestContext) -> dict:  # pragma: no cover - must not run
        raise AssertionError("replay should not be called")

    coordinator = StubCoordinator()
    interceptor = AuthInterceptor(NullTokenStore(), coordinator, replay)
    context = RequestContext(method="GET", path="/users").mark_retried()
    error = UnauthorizedError("expired", status_code=401)

    with pytest.raises(UnauthorizedError):
        await interceptor.on_error(context, error)
    assert coordinator.calls == 0


def test_on_request_leaves_context_untouched_without_token() -> None:
    interceptor = AuthInterceptor(NullTokenStore(), StubCoordinator(), replay=None)  # type: ignore[arg-type]
    context = RequestContext(method="GET", path="/gallery")

    assert interceptor.on_request(context) is context
