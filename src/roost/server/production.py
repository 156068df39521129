"""Production server.

Starts a multi-worker pounce server. The route table is frozen before
the first worker accepts a connection, so every worker dispatches
against the same immutable table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roost.app import App


def run_production_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 8000,
    workers: int = 0,  # 0 = auto-detect from CPU count
    *,
    log_format: str = "text",
    log_level: str = "info",
    keep_alive_timeout: float = 5.0,
    request_timeout: float = 30.0,
    ssl_certfile: str | None = None,
    ssl_keyfile: str | None = None,
) -> None:
    """Run a roost app with pounce in production mode.

    Args:
        app: Roost App instance.
        host: Bind address (default: 0.0.0.0 for all interfaces).
        port: Bind port (default: 8000).
        workers: Worker count (0 = auto-detect from CPU count).
        log_format: Log format ("json" or "text").
        log_level: Log level (debug, info, warning, error, critical).
        keep_alive_timeout: Keep-alive connection timeout (seconds).
        request_timeout: Individual request timeout (seconds).
        ssl_certfile: Path to TLS certificate file (enables HTTPS).
        ssl_keyfile: Path to TLS private key file.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_format=log_format,
        log_level=log_level,
        keep_alive_timeout=keep_alive_timeout,
        request_timeout=request_timeout,
        ssl_certfile=ssl_certfile,
        ssl_keyfile=ssl_keyfile,
    )

    server = Server(config, app)
    server.run()
