"""Roost — host and path routing for ASGI.

Maps each request's host and path to a handler using longest-prefix
matching over statically registered routes, with trailing-slash and
canonical-path redirects.

Basic usage::

    from roost import App, Response

    app = App()

    @app.route("/")
    def index(request, conn_info):
        return Response("Hello!")

    @app.route("/admin/")
    def admin(request, conn_info):
        return Response("Restricted!", status=403)

    app.run()

Standalone router::

    from roost import Request, Router

    router = Router()
    router.handle("example.com/", handler)
    response = await router.dispatch(Request.build("http://example.com/x"), conn_info)
"""

__version__ = "0.1.0"
__all__ = [
    "Addr",
    "App",
    "AppConfig",
    "ConfigurationError",
    "ConnInfo",
    "DuplicateRoute",
    "HTTPError",
    "InvalidRoute",
    "NotFound",
    "Request",
    "Response",
    "RoostError",
    "Route",
    "Router",
    "normalize",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from roost.app import App

        return App

    if name == "AppConfig":
        from roost.config import AppConfig

        return AppConfig

    if name == "Request":
        from roost.http.request import Request

        return Request

    if name == "Response":
        from roost.http.response import Response

        return Response

    if name in ("Addr", "ConnInfo"):
        from roost.http import conninfo

        return getattr(conninfo, name)

    if name in ("Route", "Router"):
        from roost.routing.route import Route
        from roost.routing.router import Router

        return {"Route": Route, "Router": Router}[name]

    if name == "normalize":
        from roost.routing.paths import normalize

        return normalize

    if name in (
        "ConfigurationError",
        "DuplicateRoute",
        "HTTPError",
        "InvalidRoute",
        "NotFound",
        "RoostError",
    ):
        from roost import errors

        return getattr(errors, name)

    msg = f"module 'roost' has no attribute {name!r}"
    raise AttributeError(msg)
