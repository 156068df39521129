"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

import json as json_module
from typing import Any

from roost.errors import ConfigurationError
from roost.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a handler's return value to a Response.

    Dispatch order:

    1. ``Response``            -> pass through
    2. ``str``                 -> 200, text/html
    3. ``bytes``               -> 200, application/octet-stream
    4. ``dict`` / ``list``     -> 200, application/json
    5. ``(value, int)``        -> negotiate value, override status
    6. ``(value, int, dict)``  -> negotiate value, override status + headers
    """
    match value:
        case Response():
            return value
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return Response(
                body=json_module.dumps(value, default=str),
                content_type="application/json",
            )
        case (body, int() as status):
            return negotiate(body).with_status(status)
        case (body, int() as status, dict() as headers):
            return negotiate(body).with_status(status).with_headers(headers)
        case None:
            msg = (
                "Handler returned None. Return a Response, str, bytes, "
                "dict, or a (value, status) tuple."
            )
            raise ConfigurationError(msg)
        case _:
            msg = f"Cannot convert {type(value).__name__} to a response."
            raise ConfigurationError(msg)
