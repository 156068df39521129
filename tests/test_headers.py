"""Tests for roost.http.headers — immutable, case-insensitive Headers."""

import pytest

from roost.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_getitem(self) -> None:
        h = _h(("Host", "example.com"))
        assert h["Host"] == "example.com"

    def test_case_insensitive(self) -> None:
        h = _h(("Host", "example.com"))
        assert h["host"] == "example.com"
        assert h["HOST"] == "example.com"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "Accept" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = _h(("Accept", "*/*"))
        assert 42 not in h  # type: ignore[operator]

    def test_len_deduplicates(self) -> None:
        h = _h(("Via", "a"), ("Via", "b"), ("Host", "x"))
        assert len(h) == 2

    def test_iter_yields_unique_lowercase_keys(self) -> None:
        h = _h(("Accept", "*/*"), ("Host", "x"), ("accept", "text/xml"))
        assert list(h) == ["accept", "host"]

    def test_get_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("accept") == "*/*"
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        h = _h(("Via", "a"), ("Via", "b"), ("Accept", "*/*"))
        assert h.get_list("via") == ["a", "b"]
        assert h.get_list("x-missing") == []

    def test_first_value_wins(self) -> None:
        h = _h(("Host", "first"), ("Host", "second"))
        assert h["host"] == "first"

    def test_raw(self) -> None:
        h = _h(("Host", "x"))
        assert h.raw == ((b"Host", b"x"),)


class TestFromMapping:
    def test_lowercases_names(self) -> None:
        h = Headers.from_mapping({"Host": "example.com", "X-Test": "1"})
        assert h.raw == ((b"host", b"example.com"), (b"x-test", b"1"))

    def test_none_is_empty(self) -> None:
        h = Headers.from_mapping(None)
        assert len(h) == 0
        assert h.get("host") is None

    def test_equality(self) -> None:
        assert Headers.from_mapping({"A": "1"}) == Headers.from_mapping({"a": "1"})
        assert Headers.from_mapping({"A": "1"}) != Headers.from_mapping({"A": "2"})
        assert hash(Headers.from_mapping({"A": "1"})) == hash(Headers.from_mapping({"a": "1"}))
