"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".toml")
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Routing
    redirect_status: int = 301  # Trailing-slash and canonical-path redirects

    # Production
    workers: int = 0  # 0 = auto-detect from CPU count
    log_format: str = "text"
    log_level: str = "info"
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0

    # TLS (optional)
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None
