"""ASGI handler — translates ASGI scope/messages to roost types.

The only component that touches raw ASGI request scopes directly. Builds
the Request and ConnInfo, dispatches through the router, and sends the
Response back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from roost._internal.asgi import Receive, Scope, Send
from roost.errors import HTTPError
from roost.http.conninfo import ConnInfo
from roost.http.request import Request
from roost.routing.router import Router
from roost.server.errors import handle_http_error, handle_internal_error
from roost.server.negotiation import negotiate
from roost.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    conn_info = ConnInfo.from_asgi(scope)

    try:
        result = await router.dispatch(request, conn_info)
        response = negotiate(result)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send, head=request.method == "HEAD")
