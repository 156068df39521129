"""Immutable request URL.

Holds the percent-decoded path (the same form ASGI servers put in
``scope["path"]``) alongside the path as it arrived on the wire
(``scope["raw_path"]``). Rendering uses the raw form when there is one
and re-quotes the decoded path otherwise, so redirect targets built from
a request URL are always valid ``Location`` values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from urllib.parse import quote, unquote, urlsplit, urlunsplit

# RFC 3986 pchar plus "/"; everything else in a path is percent-encoded.
_PATH_SAFE = "/:@!$&'()*+,;="


@dataclass(frozen=True, slots=True)
class URL:
    """An absolute (or origin-form) URL split into its components.

    ``raw_path`` is the still-encoded path, or ``""`` when unknown.
    """

    scheme: str = "http"
    netloc: str = ""
    path: str = "/"
    query: str = ""
    fragment: str = ""
    raw_path: str = ""

    @classmethod
    def parse(cls, url: str) -> URL:
        """Parse a URL string. The path is stored percent-decoded."""
        parts = urlsplit(url)
        return cls(
            scheme=parts.scheme or "http",
            netloc=parts.netloc,
            path=unquote(parts.path) or "/",
            query=parts.query,
            fragment=parts.fragment,
            raw_path=parts.path or "/",
        )

    @property
    def encoded_path(self) -> str:
        """The path as sent: ``raw_path`` if known, else the quoted ``path``."""
        return self.raw_path or quote(self.path, safe=_PATH_SAFE)

    @property
    def hostname(self) -> str:
        """Host without port, lowercased (``""`` when there is no authority)."""
        return hostname_of(self.netloc)

    @property
    def port(self) -> int | None:
        """Explicit port, or None when absent or malformed."""
        try:
            return urlsplit(f"//{self.netloc}").port
        except ValueError:
            return None

    def with_path(self, path: str) -> URL:
        """Return a copy with the decoded *path* replacing the current path."""
        return replace(self, path=path, raw_path="")

    def with_raw_path(self, raw_path: str) -> URL:
        """Return a copy with the percent-encoded *raw_path* as its path."""
        return replace(self, path=unquote(raw_path), raw_path=raw_path)

    def with_netloc(self, netloc: str) -> URL:
        """Return a copy with *netloc* replacing the authority."""
        return replace(self, netloc=netloc)

    def __str__(self) -> str:
        return urlunsplit(
            (
                self.scheme if self.netloc else "",
                self.netloc,
                self.encoded_path,
                self.query,
                self.fragment,
            )
        )


def hostname_of(authority: str) -> str:
    """Return the hostname part of ``<hostname>[:port]``.

    IPv6 literals lose their brackets and names are lowercased, as
    ``urllib.parse`` reports them. A malformed authority yields ``""``.
    """
    if not authority:
        return ""
    try:
        return urlsplit(f"//{authority}").hostname or ""
    except ValueError:
        return ""
