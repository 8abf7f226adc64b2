"""Tests for TransactionManager scoping."""

from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine

from campuscoffee.domain.models import Pos
from campuscoffee.infrastructure.database.transactions import TransactionManager
from campuscoffee.infrastructure.repositories.pos import PosRepository
from campuscoffee.services.pos import PosService
from tests.conftest import make_pos


class TestTransaction:
    def test_commit_on_success(
        self, transactions: TransactionManager, pos_repository: PosRepository
    ) -> None:
        with transactions.transaction():
            pos_repository.upsert(make_pos("Kept"))
        assert [p.name for p in pos_repository.get_all()] == ["Kept"]

    def test_rollback_on_error(
        self, transactions: TransactionManager, pos_repository: PosRepository
    ) -> None:
        with pytest.raises(RuntimeError), transactions.transaction():
            pos_repository.upsert(make_pos("Lost"))
            raise RuntimeError("boom")
        assert pos_repository.get_all() == []

    def test_repository_calls_share_connection(self, transactions: TransactionManager) -> None:
        with transactions.transaction() as outer:
            with transactions.connection() as inner:
                assert inner is outer
            with transactions.transaction() as nested:
                assert nested is outer

    def test_in_transaction_flag(self, transactions: TransactionManager) -> None:
        assert not transactions.in_transaction
        with transactions.transaction():
            assert transactions.in_transaction
        assert not transactions.in_transaction

    def test_nested_error_rolls_back_outer(
        self, transactions: TransactionManager, pos_repository: PosRepository
    ) -> None:
        with pytest.raises(RuntimeError), transactions.transaction():
            pos_repository.upsert(make_pos("Outer"))
            with transactions.transaction():
                pos_repository.upsert(make_pos("Inner"))
                raise RuntimeError("boom")
        assert pos_repository.get_all() == []

    def test_connection_outside_transaction_autocommits(
        self, transactions: TransactionManager, pos_repository: PosRepository
    ) -> None:
        pos_repository.upsert(make_pos("Solo"))
        fresh = PosRepository(TransactionManager(transactions.engine))
        assert [p.name for p in fresh.get_all()] == ["Solo"]

    def test_managers_are_independent(self, transactions: TransactionManager) -> None:
        other = TransactionManager(transactions.engine)
        with transactions.transaction():
            assert not other.in_transaction


class TestServiceUpsertTransaction:
    def test_failed_write_after_check_leaves_no_trace(
        self, db_engine: Engine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        service = PosService.from_engine(db_engine)
        created = service.upsert(make_pos("Before"))
        repository = service._data_port
        original_upsert = repository.upsert

        def write_then_fail(instance: Pos) -> Pos:
            original_upsert(instance)
            raise RuntimeError("storage failure after write")

        monkeypatch.setattr(repository, "upsert", write_then_fail)
        with pytest.raises(RuntimeError):
            service.upsert(created.model_copy(update={"name": "After"}))

        monkeypatch.undo()
        assert service.get_by_id(created.id).name == "Before"
