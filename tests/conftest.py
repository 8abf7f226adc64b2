"""Shared pytest fixtures and test helpers for campuscoffee tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from campuscoffee.domain.models import CampusType, Pos, PosType
from campuscoffee.infrastructure.database.engine import init_database
from campuscoffee.infrastructure.database.transactions import TransactionManager
from campuscoffee.infrastructure.repositories.pos import PosRepository


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects (CLI tests call it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("campuscoffee")
    app_level = app.level
    sql = logging.getLogger("sqlalchemy.engine")
    sql_level = sql.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
    sql.setLevel(sql_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(f"sqlite:///{tmp_path / 'campuscoffee.db'}")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def transactions(db_engine: Engine) -> TransactionManager:
    return TransactionManager(db_engine)


@pytest.fixture
def pos_repository(transactions: TransactionManager) -> PosRepository:
    return PosRepository(transactions)


@pytest.fixture
def _isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no campuscoffee env overrides.

    The default database URL is relative, so CLI tests using this fixture
    get a fresh ``campuscoffee.db`` per test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CAMPUSCOFFEE_CONFIG", raising=False)
    monkeypatch.delenv("CAMPUSCOFFEE_DATABASE__URL", raising=False)
    monkeypatch.delenv("CAMPUSCOFFEE_DATABASE__ECHO", raising=False)
    monkeypatch.delenv("CAMPUSCOFFEE_VERBOSE", raising=False)
    monkeypatch.delenv("CAMPUSCOFFEE_LOG_JSON", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_pos(name: str = "Schmelzpunkt", **overrides: Any) -> Pos:
    """Build an unsaved Pos with plausible defaults."""
    fields: dict[str, Any] = {
        "name": name,
        "description": "Coffee and cake near the old town",
        "type": PosType.CAFE,
        "campus": CampusType.ALTSTADT,
        "street": "Hauptstraße",
        "house_number": "90",
        "postal_code": 69117,
        "city": "Heidelberg",
    }
    fields.update(overrides)
    return Pos(**fields)
