"""Invoke helpers — call sync or async handlers uniformly.

Roost handlers can be ``def`` or ``async def``. Any code that calls
a user-provided handler must handle both cases. This module provides
a single helper so the sync/async check lives in exactly one place.

Usage::

    from roost._internal.invoke import invoke

    result = await invoke(handler, request, conn_info)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync: returns immediately
        def index(request, conn_info):
            return Response("hello")

        # async: returns a coroutine, awaited here
        async def index(request, conn_info):
            rows = await fetch_rows()
            return Response(render(rows))
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
