"""``roost run`` — development or production server command."""

import argparse
import sys

from roost.cli._resolve import resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Start the roost server (dev or production mode).

    Resolves ``args.app`` to a roost App, then delegates to either
    ``run_dev_server()`` (``debug=True`` and no ``--production``) or
    ``run_production_server()``. CLI flags override app config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    host = args.host or app.config.host
    port = args.port or app.config.port

    app._ensure_frozen()

    if args.production or not app.config.debug:
        from roost.server.production import run_production_server

        run_production_server(
            app,
            host=host,
            port=port,
            workers=args.workers if args.workers is not None else app.config.workers,
            log_format=app.config.log_format,
            log_level=app.config.log_level,
            keep_alive_timeout=app.config.keep_alive_timeout,
            request_timeout=app.config.request_timeout,
            ssl_certfile=app.config.ssl_certfile,
            ssl_keyfile=app.config.ssl_keyfile,
        )
    else:
        from roost.server.dev import run_dev_server

        run_dev_server(
            app,
            host,
            port,
            reload=app.config.debug,
            reload_include=app.config.reload_include,
            reload_dirs=app.config.reload_dirs,
            app_path=args.app,
        )
