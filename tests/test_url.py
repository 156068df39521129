"""Tests for roost.http.url — URL parsing and rendering."""

import pytest

from roost.http.url import URL, hostname_of


class TestParse:
    def test_components(self) -> None:
        url = URL.parse("http://0.0.0.0:4505/path?qs=test#hash")
        assert url.scheme == "http"
        assert url.netloc == "0.0.0.0:4505"
        assert url.path == "/path"
        assert url.query == "qs=test"
        assert url.fragment == "hash"

    def test_path_is_decoded(self) -> None:
        assert URL.parse("http://host/caf%C3%A9").path == "/café"

    def test_empty_path_is_root(self) -> None:
        assert URL.parse("http://host").path == "/"

    def test_origin_form(self) -> None:
        url = URL.parse("/a/b?x=1")
        assert url.netloc == ""
        assert url.path == "/a/b"
        assert str(url) == "/a/b?x=1"


class TestHostnameAndPort:
    def test_hostname_strips_port(self) -> None:
        url = URL.parse("http://Example.COM:8080/")
        assert url.hostname == "example.com"
        assert url.port == 8080

    def test_no_port(self) -> None:
        assert URL.parse("http://example.com/").port is None

    def test_bad_port(self) -> None:
        assert URL(netloc="example.com:http").port is None

    def test_ipv6(self) -> None:
        url = URL.parse("http://[::1]:4505/")
        assert url.hostname == "::1"
        assert url.port == 4505

    @pytest.mark.parametrize(
        ("authority", "expected"),
        [
            ("example.com", "example.com"),
            ("example.com:80", "example.com"),
            ("0.0.0.1:4505", "0.0.0.1"),
            ("[::1]:80", "::1"),
            ("", ""),
        ],
    )
    def test_hostname_of(self, authority: str, expected: str) -> None:
        assert hostname_of(authority) == expected


class TestRender:
    def test_round_trip(self) -> None:
        raw = "http://0.0.0.0:4505/path/?qs=test#hash"
        assert str(URL.parse(raw)) == raw

    def test_with_path_keeps_query_and_fragment(self) -> None:
        url = URL.parse("http://0.0.0.0:4505/path?qs=test#hash").with_path("/path/")
        assert str(url) == "http://0.0.0.0:4505/path/?qs=test#hash"

    def test_path_is_quoted(self) -> None:
        url = URL(scheme="https", netloc="host", path="/café menu/")
        assert str(url) == "https://host/caf%C3%A9%20menu/"

    def test_subdelims_not_quoted(self) -> None:
        url = URL(netloc="host", path="/a:b@c;d=e")
        assert str(url) == "http://host/a:b@c;d=e"


class TestRawPath:
    def test_parse_keeps_raw_path(self) -> None:
        url = URL.parse("http://host/a%2F%2Fb")
        assert url.path == "/a//b"
        assert url.raw_path == "/a%2F%2Fb"
        assert str(url) == "http://host/a%2F%2Fb"

    def test_encoded_path_falls_back_to_quoting(self) -> None:
        assert URL(path="/café/").encoded_path == "/caf%C3%A9/"

    def test_with_raw_path(self) -> None:
        url = URL.parse("http://host/x?q=1").with_raw_path("/a%2Fb/")
        assert url.path == "/a/b/"
        assert str(url) == "http://host/a%2Fb/?q=1"

    def test_with_path_drops_raw_path(self) -> None:
        url = URL.parse("http://host/a%2Fb").with_path("/c d")
        assert url.raw_path == ""
        assert str(url) == "http://host/c%20d"

    def test_with_netloc(self) -> None:
        url = URL.parse("http://127.0.0.1:8000/path?qs=1").with_netloc("example.com")
        assert str(url) == "http://example.com/path?qs=1"


class TestMalformedAuthority:
    @pytest.mark.parametrize("authority", ["[::1", "example.com]", "[::1:80"])
    def test_hostname_of_returns_empty(self, authority: str) -> None:
        assert hostname_of(authority) == ""

    def test_url_hostname_does_not_raise(self) -> None:
        assert URL(netloc="[::1").hostname == ""
