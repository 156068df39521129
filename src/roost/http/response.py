"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from roost.http.status import MOVED_PERMANENTLY, NOT_FOUND, status_text


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    A ``content_type`` of ``None`` sends no Content-Type header.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str | None = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_content_type(self, content_type: str | None) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Lookup --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first header value for *name* (case-insensitive)."""
        name_lower = name.lower()
        if name_lower == "content-type" and self.content_type is not None:
            return self.content_type
        for key, value in self.headers:
            if key.lower() == name_lower:
                return value
        return default

    @property
    def location(self) -> str | None:
        """The Location header, if this is a redirect."""
        return self.header("location")

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


def redirect(url: str, status: int = MOVED_PERMANENTLY) -> Response:
    """An empty-bodied redirect to *url*."""
    return Response(
        body=b"",
        status=status,
        content_type=None,
        headers=(("location", url),),
    )


def not_found() -> Response:
    """The canned 404 the router answers with when nothing matches."""
    return Response(
        body=status_text(NOT_FOUND),
        status=NOT_FOUND,
        content_type="text/plain; charset=utf-8",
        headers=(("x-content-type-options", "nosniff"),),
    )
