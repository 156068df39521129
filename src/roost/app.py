"""Roost application class.

Mutable during setup (route registration, error handlers, hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable
from typing import Any

from roost._internal.asgi import Receive, Scope, Send
from roost._internal.types import ErrorHandler, Handler
from roost.config import AppConfig
from roost.errors import ConfigurationError
from roost.routing.router import Router
from roost.server.handler import handle_request

logger = logging.getLogger("roost.server")


class App:
    """The roost application: a Router behind an ASGI 3 interface.

    Mutable during setup (routes, error handlers, lifecycle hooks).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked;
    from then on the route table is read-only and registering raises.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check to ensure exactly
        one thread compiles the router, even when multiple ASGI workers
        call ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router = Router(redirect_status=self.config.redirect_status)
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @property
    def router(self) -> Router:
        """The route table this app dispatches through."""
        return self._router

    # -- Route registration --

    def route(self, pattern: str) -> Callable[[Handler], Handler]:
        """Register the decorated function as the handler for *pattern*.

        Usage::

            @app.route("/")
            def index(request, conn_info):
                return Response("Hello!")

            @app.route("example.com/static/")
            async def static(request, conn_info):
                ...
        """

        def decorator(func: Handler) -> Handler:
            self.handle(pattern, func)
            return func

        return decorator

    def handle(self, pattern: str, handler: Handler) -> None:
        """Register *handler* for *pattern* (see ``Router.handle``)."""
        self._check_not_frozen()
        self._router.handle(pattern, handler)

    def error(
        self,
        code_or_exception: int | type[Exception],
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler for a status code or exception type.

        Error handlers may accept ``()``, ``(request)``, or
        ``(request, exc)`` and return anything a route handler can.
        """

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once on ASGI lifespan startup (sync or async)."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once on ASGI lifespan shutdown (sync or async)."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        Freezes the route table and starts serving requests through pounce.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from roost.server.dev import run_dev_server

            run_dev_server(
                self,
                _host,
                _port,
                reload=self.config.debug,
                reload_include=self.config.reload_include,
                reload_dirs=self.config.reload_dirs,
            )
        else:
            from roost.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_format=self.config.log_format,
                log_level=self.config.log_level,
                keep_alive_timeout=self.config.keep_alive_timeout,
                request_timeout=self.config.request_timeout,
                ssl_certfile=self.config.ssl_certfile,
                ssl_keyfile=self.config.ssl_keyfile,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            error_handlers=self._error_handlers,
            debug=self.config.debug,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("startup hook failed")
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Freeze the app and run the startup hooks in registration order."""
        self._ensure_frozen()
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    async def shutdown(self) -> None:
        """Run the shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking.

        Multiple ASGI worker threads could call __call__() concurrently on
        first request. This pattern ensures exactly one thread compiles.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.compile()
            self._frozen = True
            logger.debug("route table frozen with %d routes", len(self._router))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and error handlers before calling app.run()."
            )
            raise ConfigurationError(msg)
