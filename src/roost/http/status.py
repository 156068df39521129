"""Status code to reason phrase table.

Backed by the standard library's ``http.HTTPStatus`` so the phrases
match what every other Python HTTP stack emits.
"""

from collections.abc import Mapping
from http import HTTPStatus
from types import MappingProxyType

STATUS_TEXT: Mapping[int, str] = MappingProxyType(
    {status.value: status.phrase for status in HTTPStatus}
)

MOVED_PERMANENTLY = HTTPStatus.MOVED_PERMANENTLY.value
NOT_FOUND = HTTPStatus.NOT_FOUND.value


def status_text(code: int) -> str:
    """Return the canonical reason phrase for *code* (``""`` if unknown)."""
    return STATUS_TEXT.get(code, "")
