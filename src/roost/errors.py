"""Roost exception hierarchy.

Shared across Router, App, and the server pipeline so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when router or app setup is invalid.

    Typically surfaces at startup, while routes are being registered.
    """


class InvalidRoute(ConfigurationError):  # noqa: N818
    """Registration with an empty route string."""

    def __init__(self, detail: str = "Invalid route") -> None:
        super().__init__(detail)


class DuplicateRoute(ConfigurationError):  # noqa: N818
    """Registration of a route string that is already in the table."""

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"Route {route} already registered")


@dataclass(frozen=True, slots=True)
class HTTPError(RoostError):
    """An error that maps directly to an HTTP status code.

    Raised by handlers to short-circuit with a status. The ASGI handler
    catches these and dispatches to the matching ``@app.error()`` handler.
    The router itself never raises these.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — raised by a handler that owns a subtree but not this path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
