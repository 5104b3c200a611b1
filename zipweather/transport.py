from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from zipweather.errors import TransportError
from zipweather.redact import build_url, redact


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: str


class Transport(ABC):
    """Issues a single parameterized GET and returns ``(status, body)``.

    Status codes are never interpreted here; callers decide what counts as
    a failure. Any failure to complete the exchange is a ``TransportError``.
    """

    @abstractmethod
    async def get(self, url: str, params: Mapping[str, str]) -> HttpResponse:
        pass  # pragma: no cover


def _log_request(url: str, params: Mapping[str, str]) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            'GET %s', redact(build_url(url, params), params.get('appid', ''))
        )


class HttpxTransport(Transport):
    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def get(self, url: str, params: Mapping[str, str]) -> HttpResponse:
        _log_request(url, params)
        try:
            if self._client is not None:
                response = await self._client.get(url, params=dict(params))
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, params=dict(params))
        except httpx.RequestError as exc:
            raise TransportError(f'{type(exc).__name__}: {exc}') from exc
        return HttpResponse(status=response.status_code, body=response.text)


Fetch = Callable[..., Awaitable[Any]]


def _host_errors() -> tuple[type[BaseException], ...]:
    try:
        from pyodide.ffi import JsException
    except ImportError:
        return (OSError,)
    return (OSError, JsException)


class PyodideTransport(Transport):
    """Transport for the Pyodide runtime, where there is no socket access.

    Requests go through the host ``fetch`` via ``pyodide.http.pyfetch`` and
    must be awaited on the browser's single-threaded event loop. A
    compatible coroutine function can be injected as *fetch*.
    """

    def __init__(self, fetch: Fetch | None = None) -> None:
        self._fetch = fetch

    def _resolve_fetch(self) -> Fetch:
        if self._fetch is None:
            try:
                from pyodide.http import pyfetch
            except ImportError as exc:
                raise TransportError(
                    'pyfetch is only available inside the Pyodide runtime'
                ) from exc
            self._fetch = pyfetch
        return self._fetch

    async def get(self, url: str, params: Mapping[str, str]) -> HttpResponse:
        fetch = self._resolve_fetch()
        host_errors = _host_errors()
        _log_request(url, params)
        try:
            response = await fetch(build_url(url, params), method='GET')
            status = int(response.status)
            body = await response.text()
        except host_errors as exc:
            raise TransportError(f'{type(exc).__name__}: {exc}') from exc
        if not isinstance(body, str):
            raise TransportError('Failed to convert response to string')
        return HttpResponse(status=status, body=body)


@dataclass
class InMemoryTransport(Transport):
    """Serves canned responses keyed by URL and records every request."""

    responses: dict[str, HttpResponse] = field(default_factory=dict)
    requests: list[tuple[str, dict[str, str]]] = field(default_factory=list)

    def add(self, url: str, status: int, body: str) -> InMemoryTransport:
        self.responses[url] = HttpResponse(status=status, body=body)
        return self

    async def get(self, url: str, params: Mapping[str, str]) -> HttpResponse:
        self.requests.append((url, dict(params)))
        try:
            return self.responses[url]
        except KeyError:
            raise TransportError(f'No route to {url}') from None
