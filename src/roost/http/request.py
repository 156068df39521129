"""Immutable HTTP request.

Frozen metadata with async body access. The request is honest about
what it is: received data that doesn't change.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncGenerator, Mapping
from dataclasses import dataclass, field
from typing import Any

from roost._internal.asgi import Receive
from roost.http.headers import Headers
from roost.http.url import URL

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, url, headers) is frozen at creation.
    Body is accessed asynchronously via ``.body()``, ``.text()``, ``.json()``.
    """

    method: str
    url: URL
    headers: Headers
    http_version: str

    # Private: ASGI receive callable for body streaming
    _receive: Receive = field(repr=False, compare=False)

    # Private: mutable cache for the body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def path(self) -> str:
        """The URL path, percent-decoded and not yet normalized."""
        return self.url.path

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes, None]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON."""
        raw = await self.body()
        return json_module.loads(raw)

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable.

        The URL authority comes from the connection (``scope["server"]``),
        not from the ``Host`` header, so routing can tell the two apart.
        When the server reports no address the ``Host`` header is used.
        ``scope["raw_path"]`` is kept so the path can be compared as sent.
        """
        headers = Headers(tuple(scope.get("headers", ())))
        scheme = scope.get("scheme", "http")
        server = scope.get("server")
        if server:
            host, port = server[0], server[1]
            if ":" in host:
                host = f"[{host}]"
            default_port = _DEFAULT_PORTS.get(scheme)
            netloc = host if port is None or port == default_port else f"{host}:{port}"
        else:
            netloc = headers.get("host", "")
        raw_path = scope.get("raw_path")
        url = URL(
            scheme=scheme,
            netloc=netloc,
            path=scope["path"] or "/",
            query=scope.get("query_string", b"").decode("latin-1"),
            raw_path=raw_path.decode("latin-1") if raw_path else "",
        )
        return cls(
            method=scope["method"],
            url=url,
            headers=headers,
            http_version=scope.get("http_version", "1.1"),
            _receive=receive,
        )

    @classmethod
    def build(
        cls,
        url: str | URL,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
        http_version: str = "1.1",
    ) -> Request:
        """Create a Request directly, without an ASGI server.

        Handy for calling ``Router.dispatch`` from tests or other
        in-process drivers::

            request = Request.build("http://example.com/path?qs=test")
        """
        sent = False

        async def receive() -> dict[str, Any]:
            nonlocal sent
            if sent:
                return {"type": "http.disconnect"}
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}

        return cls(
            method=method.upper(),
            url=url if isinstance(url, URL) else URL.parse(url),
            headers=Headers.from_mapping(headers),
            http_version=http_version,
            _receive=receive,
        )
