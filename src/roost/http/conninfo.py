"""Connection metadata handed to every handler alongside the request."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Addr:
    """One end of a connection."""

    hostname: str
    port: int
    transport: str = "tcp"

    @classmethod
    def from_pair(cls, pair: Sequence[Any] | None, transport: str = "tcp") -> Addr | None:
        """Build from an ASGI ``(host, port)`` pair; ``None`` stays ``None``."""
        if not pair:
            return None
        host, port = pair[0], pair[1]
        return cls(hostname=str(host), port=int(port) if port is not None else 0, transport=transport)


@dataclass(frozen=True, slots=True)
class ConnInfo:
    """Local and remote address of the connection a request arrived on.

    Opaque to the router: passed through to handlers unmodified.
    Either address may be ``None`` (e.g. unix sockets, where the ASGI
    server reports no peer).
    """

    local_addr: Addr | None
    remote_addr: Addr | None

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> ConnInfo:
        """Build from the ``server`` / ``client`` entries of an ASGI scope."""
        return cls(
            local_addr=Addr.from_pair(scope.get("server")),
            remote_addr=Addr.from_pair(scope.get("client")),
        )
