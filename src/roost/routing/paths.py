"""URL path normalization.

Collapses duplicate separators and resolves ``.`` / ``..`` segments the
way browsers resolve dot-segments in URLs, so a path that names the same
resource always has one canonical spelling.
"""

_DOT_SEGMENTS = frozenset({".", ".."})


def normalize(path: str) -> str:
    """Return the canonical form of *path*.

    Examples::

        "/a//b"              -> "/a/b"
        "/a/./b/../c"        -> "/a/c"
        "/path/../path//."   -> "/path/"
        "/.."                -> "/"
        ""                   -> "."

    A leading ``/`` is kept, ``..`` never climbs above the root of an
    absolute path, and a trailing ``/`` is kept when the input ends in
    one (or, for absolute paths, in a dot-segment). Idempotent.
    """
    if not path:
        return "."

    is_absolute = path.startswith("/")
    segments = path.split("/")

    resolved: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if resolved and resolved[-1] != "..":
                resolved.pop()
            elif not is_absolute:
                resolved.append("..")
            continue
        resolved.append(segment)

    result = "/".join(resolved)
    if is_absolute:
        result = f"/{result}"
    if not result:
        return "."

    trailing = path.endswith("/") or (is_absolute and segments[-1] in _DOT_SEGMENTS)
    if trailing and not result.endswith("/"):
        result = f"{result}/"
    return result
