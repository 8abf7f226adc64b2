"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, campuscoffee.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    url: str = "sqlite:///campuscoffee.db"
    # Logs SQL statements to stderr, never stdout
    echo: bool = False
