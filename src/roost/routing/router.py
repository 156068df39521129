"""Host + path router with longest-prefix matching.

Routes are registered during setup and frozen by ``compile()`` before
serving begins. Dispatch only reads the table, so any number of
requests can be dispatched concurrently.
"""

import logging
from bisect import bisect_right
from typing import Any
from urllib.parse import unquote

from roost._internal.invoke import invoke
from roost._internal.types import Handler
from roost.errors import ConfigurationError, DuplicateRoute, InvalidRoute
from roost.http.conninfo import ConnInfo
from roost.http.request import Request
from roost.http.response import Response, not_found, redirect
from roost.http.status import MOVED_PERMANENTLY
from roost.http.url import URL, hostname_of
from roost.routing.paths import normalize
from roost.routing.route import Route

logger = logging.getLogger("roost.routing")


def _get_hostname(request: Request) -> str:
    """Host without port for the request.

    For HTTP/1 (RFC 7230, section 5.4) this is either the value of the
    ``Host`` header or the host name given in the URL itself. ASGI servers
    fold the HTTP/2 ``:authority`` pseudo-header into ``Host``. A missing
    or malformed header falls back to the URL.
    """
    host_header = request.headers.get("host")
    return (host_header and hostname_of(host_header)) or request.url.hostname


def _client_url(request: Request) -> URL:
    """The request URL with the authority the client asked for."""
    host_header = request.headers.get("host")
    if host_header and hostname_of(host_header):
        return request.url.with_netloc(host_header)
    return request.url


def _redirect_handler(url: str, status: int) -> Handler:
    """Build a handler answering every call with a redirect to *url*."""
    response = redirect(url, status)

    def _redirect(request: Request, conn_info: ConnInfo) -> Response:
        return response

    return _redirect


def _not_found_handler(request: Request, conn_info: ConnInfo) -> Response:
    return not_found()


class Router:
    """HTTP request router.

    Matches the host and path of each incoming request against the
    registered routes and executes the associated handler.

    Routes can be fixed, rooted paths (``"/index.html"``) or rooted
    subtrees (``"/public/"``). Longer routes take precedence over shorter
    ones: with handlers for both ``"/public/"`` and ``"/public/images/"``
    the latter serves paths starting with ``"/public/images/"`` and the
    former everything else under ``"/public/"``.

    A route ending in ``/`` is a rooted subtree and matches any path it is
    a prefix of, so a route of just ``"/"`` matches every request.

    A request without a trailing slash that matches nothing, but would
    match a registered route with one, is redirected to the slashed path.
    A request whose path is not in canonical form is redirected to it.

    Routes can start with a hostname (``"example.com/"``) to restrict them
    to requests for that host. Host-specific routes take precedence over
    host-less ones.

    Usage::

        router = Router()
        router.handle("/", index)
        router.handle("/admin/", admin)
        router.compile()
        response = await router.dispatch(request, conn_info)
    """

    __slots__ = ("_compiled", "_hosts", "_redirect_status", "_routes", "_subtrees")

    def __init__(self, *, redirect_status: int = MOVED_PERMANENTLY) -> None:
        self._routes: dict[str, Route] = {}
        # Subtree patterns, longest first
        self._subtrees: list[str] = []
        self._hosts = False
        self._compiled = False
        self._redirect_status = redirect_status

    # -- Registration --

    def handle(self, route: str, handler: Handler) -> None:
        """Register *handler* for *route*.

        Raises:
            InvalidRoute: If *route* is empty.
            DuplicateRoute: If *route* is already registered.
            ConfigurationError: If the router has been compiled.
        """
        if self._compiled:
            msg = f"Cannot register route {route!r} after the router has been compiled."
            raise ConfigurationError(msg)
        if route == "":
            raise InvalidRoute
        if route in self._routes:
            raise DuplicateRoute(route)

        self._routes[route] = Route(pattern=route, handler=handler)

        if route.endswith("/"):
            # Before the first strictly shorter entry
            index = bisect_right(self._subtrees, -len(route), key=lambda r: -len(r))
            self._subtrees.insert(index, route)

        if not route.startswith("/"):
            self._hosts = True

        logger.debug("registered route %r -> %s", route, getattr(handler, "__name__", handler))

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    @property
    def compiled(self) -> bool:
        """True once ``compile()`` has been called."""
        return self._compiled

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order."""
        return list(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, route: object) -> bool:
        return route in self._routes

    # -- Matching --

    def _match(self, key: str) -> Route | None:
        """Exact match first, then the longest subtree prefixing *key*."""
        route = self._routes.get(key)
        if route is not None:
            return route

        for pattern in self._subtrees:
            if key.startswith(pattern):
                return self._routes[pattern]

        return None

    def match(self, host: str, path: str) -> Route | None:
        """Match *host* and *path* against the registered routes.

        Host-qualified routes are tried in full (exact, then subtrees)
        before host-less ones. Returns ``None`` when nothing matches.
        """
        route = None
        if self._hosts:
            route = self._match(f"{host}{path}")
        if route is None:
            route = self._match(path)
        return route

    def _should_redirect(self, host: str, path: str) -> bool:
        """Whether *path* needs a ``/`` appended.

        True when nothing is registered for the path itself but something
        is registered for the path plus ``/``.
        """
        candidates = (path, f"{host}{path}")

        if any(candidate in self._routes for candidate in candidates):
            return False

        has_trailing_slash = path.endswith("/")

        for candidate in candidates:
            if f"{candidate}/" in self._routes:
                return not has_trailing_slash

        return False

    def resolve(self, request: Request) -> Handler:
        """Return the handler ``dispatch`` would invoke for *request*.

        That is a registered handler, a redirect to the slashed or
        canonical path, or the "Not Found" handler.

        The canonical form is computed on the path as sent, so an encoded
        ``%2F`` stays part of its segment. Redirects keep the authority
        from the ``Host`` header when there is a usable one.
        """
        url = request.url
        hostname = _get_hostname(request)
        raw_path = url.encoded_path
        canonical = normalize(raw_path)
        path = unquote(canonical)

        if self._should_redirect(hostname, path):
            location = str(_client_url(request).with_raw_path(f"{canonical}/"))
            logger.debug("redirect %s -> %s (trailing slash)", raw_path, location)
            return _redirect_handler(location, self._redirect_status)

        if canonical != raw_path:
            location = str(_client_url(request).with_raw_path(canonical))
            logger.debug("redirect %s -> %s (canonical path)", raw_path, location)
            return _redirect_handler(location, self._redirect_status)

        route = self.match(hostname, path)
        if route is None:
            logger.debug("no route for %s%s", hostname, path)
            return _not_found_handler
        return route.handler

    # -- Dispatch --

    async def dispatch(self, request: Request, conn_info: ConnInfo) -> Any:
        """Handle *request*: resolve a handler and return its result.

        Sync and async handlers are both supported. Routing itself never
        raises; exceptions from the handler propagate to the caller.
        """
        handler = self.resolve(request)
        return await invoke(handler, request, conn_info)
