"""HTTP transport used by PendingCall and notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

from jsonrpc_post.errors import TransportError

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    text: str


@runtime_checkable
class HttpTransport(Protocol):
    """POST a body to a URL. Raises TransportError when no response is received."""

    async def post(self, url: str, body: str) -> HttpResponse:
        ...


class HttpxTransport:
    """One httpx.AsyncClient per exchange; no pooling, retries or timeout."""

    def __init__(
        self,
        *,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any,
    ):
        self.headers = {**JSON_HEADERS, **(headers or {})}
        self._transport = transport
        self._client_kwargs = client_kwargs

    async def post(self, url: str, body: str) -> HttpResponse:
        try:
            async with httpx.AsyncClient(
                timeout=None,
                transport=self._transport,
                **self._client_kwargs,
            ) as client:
                resp = await client.post(url, content=body.encode("utf-8"), headers=self.headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc
        return HttpResponse(status_code=resp.status_code, text=resp.text)
