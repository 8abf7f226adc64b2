"""Tests for CoffeeSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from campuscoffee.config.settings import CoffeeSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "CAMPUSCOFFEE_CONFIG",
        "CAMPUSCOFFEE_VERBOSE",
        "CAMPUSCOFFEE_LOG_JSON",
        "CAMPUSCOFFEE_DATABASE__URL",
        "CAMPUSCOFFEE_DATABASE__ECHO",
    ):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = CoffeeSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.verbose == 0
        assert settings.log_json is False
        assert settings.database.url == "sqlite:///campuscoffee.db"
        assert settings.database.echo is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CoffeeSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "campuscoffee.toml"
        toml.write_text('verbose = 2\n[database]\nurl = "sqlite:///from-toml.db"\n')
        settings = CoffeeSettings.from_cli(start=tmp_path)
        assert settings.verbose == 2
        assert settings.database.url == "sqlite:///from-toml.db"
        assert settings.database.echo is False  # default preserved
        assert settings.config_path == toml.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[database]\necho = true\n")
        settings = CoffeeSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.database.echo is True
        assert settings.config_path == custom

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "kiosk"\n\n'
            '[tool.campuscoffee]\nverbose = 1\n'
            '[tool.campuscoffee.database]\nurl = "sqlite:///kiosk.db"\n'
        )
        settings = CoffeeSettings.from_cli(start=tmp_path)
        assert settings.config_path == pyproject.resolve()
        assert settings.verbose == 1
        assert settings.database.url == "sqlite:///kiosk.db"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "campuscoffee.toml").write_text("[database\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CoffeeSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "campuscoffee.toml").write_text('[database]\nurl = "sqlite:///toml.db"\n')
        monkeypatch.setenv("CAMPUSCOFFEE_DATABASE__URL", "sqlite:///env.db")
        settings = CoffeeSettings.from_cli(start=tmp_path)
        assert settings.database.url == "sqlite:///env.db"

    def test_cli_database_url_keeps_other_fields(self, tmp_path: Path) -> None:
        (tmp_path / "campuscoffee.toml").write_text(
            '[database]\nurl = "sqlite:///toml.db"\necho = true\n'
        )
        settings = CoffeeSettings.from_cli(start=tmp_path, database_url="sqlite:///cli.db")
        assert settings.database.url == "sqlite:///cli.db"
        assert settings.database.echo is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "campuscoffee.toml").write_text("log_json = false\n")
        settings = CoffeeSettings.from_cli(start=tmp_path, log_json=True)
        assert settings.log_json is True
