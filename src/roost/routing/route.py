"""Route frozen dataclass."""

from dataclasses import dataclass

from roost._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    ``pattern`` is one of:

    - an exact path: ``/index.html``
    - a rooted subtree (trailing ``/``): ``/public/``
    - either of those prefixed with a hostname: ``example.com/public/``
    """

    pattern: str
    handler: Handler

    @property
    def is_subtree(self) -> bool:
        """True if the route matches every path it is a prefix of."""
        return self.pattern.endswith("/")

    @property
    def host(self) -> str:
        """Hostname prefix, or ``""`` for host-less routes."""
        host, _, _ = self.pattern.partition("/")
        return host

    @property
    def path(self) -> str:
        """The path part of the pattern (everything from the first ``/``)."""
        index = self.pattern.find("/")
        return self.pattern[index:] if index >= 0 else ""
