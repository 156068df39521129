"""Tests for roost.cli — CLI entrypoint, app resolution, and route listing."""

import sys
import types
from collections.abc import Iterator

import pytest

from roost.app import App
from roost.cli import main
from roost.cli._resolve import resolve_app


def _index(request, conn_info):
    return "index"


def _static(request, conn_info):
    return "static"


@pytest.fixture
def app_module() -> Iterator[str]:
    """Register a throwaway module holding a small roost app."""
    name = "_roost_cli_test_app"
    module = types.ModuleType(name)

    app = App()
    app.handle("/", _index)
    app.handle("example.com/static/", _static)
    app.handle("/robots.txt", _index)
    module.app = app  # type: ignore[attr-defined]

    empty = App()
    module.empty = empty  # type: ignore[attr-defined]
    module.factory = lambda: app  # type: ignore[attr-defined]
    module.not_an_app = 42  # type: ignore[attr-defined]

    sys.modules[name] = module
    yield name
    sys.modules.pop(name, None)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_run_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_run_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run"])
        assert exc_info.value.code == 2

    def test_routes_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "roost" in capsys.readouterr().out


class TestResolveApp:
    def test_module_and_attribute(self, app_module: str) -> None:
        app = resolve_app(f"{app_module}:app")
        assert isinstance(app, App)
        assert len(app.router) == 3

    def test_default_attribute(self, app_module: str) -> None:
        assert resolve_app(app_module) is resolve_app(f"{app_module}:app")

    def test_factory(self, app_module: str) -> None:
        assert resolve_app(f"{app_module}:factory") is resolve_app(f"{app_module}:app")

    def test_not_an_app(self, app_module: str) -> None:
        with pytest.raises(TypeError, match="not a roost.App"):
            resolve_app(f"{app_module}:not_an_app")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("_roost_no_such_module:app")


class TestRoutesCommand:
    def test_lists_routes_in_registration_order(
        self, app_module: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", f"{app_module}:app"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["HOST", "PATH", "KIND", "HANDLER"]
        assert lines[2].split() == ["*", "/", "subtree", "_index"]
        assert lines[3].split() == ["example.com", "/static/", "subtree", "_static"]
        assert lines[4].split() == ["*", "/robots.txt", "exact", "_index"]

    def test_empty_app(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", f"{app_module}:empty"])
        assert capsys.readouterr().out.strip() == "No routes registered."

    def test_bad_import_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_roost_no_such_module:app"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestRunCommand:
    def test_production_uses_config(self, app_module: str, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple] = []

        def fake_production(app, **kwargs):
            calls.append((app, kwargs))

        monkeypatch.setattr(
            "roost.server.production.run_production_server", fake_production
        )
        main(["run", f"{app_module}:app", "--port", "4506", "--workers", "2"])

        app, kwargs = calls[0]
        assert kwargs["port"] == 4506
        assert kwargs["workers"] == 2
        assert kwargs["host"] == "127.0.0.1"
        assert app.router.compiled is True
