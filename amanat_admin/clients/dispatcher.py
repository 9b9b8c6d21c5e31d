"""
HTTP request dispatcher for the admin REST API.

Wraps a single ``httpx.AsyncClient`` configured with the API base URL, the
request timeout, JSON defaults and a cookie jar, and runs every call through
the registered interceptors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional, Protocol

import httpx

from amanat_admin.clients.errors import ApiError, TransportError, error_for_status
from amanat_admin.core.config import ApiSettings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class RequestContext:
    """Immutable description of one outgoing API call."""

    method: str
    path: str
    body: Any = None
    params: Optional[Mapping[str, Any]] = None
    files: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    retried: bool = False
    allow_refresh: bool = True

    def with_header(self, name: str, value: str) -> "RequestContext":
        headers = {
            key: existing
            for key, existing in self.headers.items()
            if key.lower() != name.lower()
        }
        headers[name] = value
        return replace(self, headers=headers)

    def with_bearer(self, token: str) -> "RequestContext":
        return self.with_header("Authorization", f"Bearer {token}")

    def mark_retried(self) -> "RequestContext":
        return replace(self, retried=True)


class Interceptor(Protocol):
    def on_request(self, context: RequestContext) -> RequestContext:
        ...

    async def on_error(self, context: RequestContext, error: ApiError) -> Any:
        """Recover from ``error`` by returning a response body, or raise."""
        ...


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class RequestDispatcher:
    """Send API calls and return the decoded response body."""

    def __init__(
        self,
        settings: ApiSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        # The client keeps cookies across calls, mirroring credentialed
        # cross-origin requests in the browser console.
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            headers={"Accept": JSON_CONTENT_TYPE},
            transport=transport,
        )
        self._interceptors: List[Interceptor] = []

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def add_interceptor(self, interceptor: Interceptor) -> None:
        self._interceptors.append(interceptor)

    async def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        files: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        allow_refresh: bool = True,
    ) -> Any:
        context = RequestContext(
            method=method.upper(),
            path=path,
            body=body,
            params=params,
            files=files,
            headers=dict(headers or {}),
            allow_refresh=allow_refresh,
        )
        return await self.dispatch(context)

    async def dispatch(self, context: RequestContext) -> Any:
        """Run ``context`` through the interceptors and over the wire."""
        for interceptor in self._interceptors:
            context = interceptor.on_request(context)

        try:
            return await self.transmit(context)
        except ApiError as exc:
            error = exc

        for interceptor in self._interceptors:
            try:
                return await interceptor.on_error(context, error)
            except ApiError as exc:
                error = exc
        raise error

    async def transmit(self, context: RequestContext) -> Any:
        """Send ``context`` as-is, without running any interceptor."""
        headers = httpx.Headers(context.headers)
        is_multipart = context.files is not None
        if not is_multipart and "Content-Type" not in headers:
            headers["Content-Type"] = JSON_CONTENT_TYPE

        try:
            response = await self._client.request(
                context.method,
                context.path,
                json=None if is_multipart else context.body,
                data=context.body if is_multipart else None,
                files=context.files,
                params=_clean_params(context.params),
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request timed out after {self._settings.timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or "Network Error") from exc

        payload = _decode_body(response)
        if response.is_error:
            raise error_for_status(response.status_code, payload)
        return payload

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RequestDispatcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["Interceptor", "JSON_CONTENT_TYPE", "RequestContext", "RequestDispatcher"]
