from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import httpx

from .config import get_settings
from .errors import TransportError
from .sms import HttpResponse


class HttpTransport(Protocol):
    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> HttpResponse: ...


class HttpxTransport:
    """
    Blocking POST over httpx.

    HTTP status codes are returned, not raised: the client decides what a
    response means from its body. Only failures to complete the request
    (connection, TLS, timeout) become TransportError. No retries.
    """

    def __init__(self, timeout: float | None = None, client: httpx.Client | None = None) -> None:
        if client is None:
            if timeout is None:
                timeout = get_settings().timeout
            client = httpx.Client(timeout=timeout)
        self._client = client

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> HttpResponse:
        try:
            resp = self._client.post(url, headers=dict(headers), content=body)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc
        return HttpResponse(status=resp.status_code, body=resp.content)

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
