"""``roost routes`` — list registered routes.

Resolves an import string to a roost App and prints the route table
with host, path, kind, and handler.
"""

import argparse
import sys

from roost.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a roost app, in registration order."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        kind = "subtree" if route.is_subtree else "exact"
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        rows.append((route.host or "*", route.path, kind, handler_name))

    max_host = max(max(len(r[0]) for r in rows), 4)  # "HOST" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_host}}}  {{:<{max_path}}}  {{:<7}}  {{}}"
    print(fmt.format("HOST", "PATH", "KIND", "HANDLER"))
    sep_len = max_host + max_path + 13 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
