"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CAMPUSCOFFEE_*`` prefix, ``__`` for nested fields
  3. TOML file    — ``campuscoffee.toml`` or ``pyproject.toml`` found via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`campuscoffee.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from campuscoffee.config.discovery import config_section, find_config
from campuscoffee.config.models import DatabaseConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from ``campuscoffee.toml`` or ``[tool.campuscoffee]``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = config_section(toml_path, tomllib.loads(raw))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CoffeeSettings(BaseSettings):
    """Settings for the campuscoffee CLI and service wiring.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: ``-v`` count; 1 shows INFO, 2 or more shows DEBUG.
        log_json: JSON log lines instead of console rendering.
        database: ``[database]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CAMPUSCOFFEE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    verbose: int = 0
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        database_url: str | None = None,
        **cli_flags: Any,
    ) -> CoffeeSettings:
        """Construct settings from a CLI invocation.

        Discovers ``campuscoffee.toml`` via walk-up from *start* (or uses
        the explicit *config_path*) and merges CLI flags as
        highest-priority overrides. *database_url* overrides only
        ``database.url``; the rest of the section keeps lower-priority values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        overrides: dict[str, Any] = dict(cli_flags)
        if database_url is not None:
            overrides["database"] = {"url": database_url}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
