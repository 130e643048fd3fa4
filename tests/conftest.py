from __future__ import annotations

import pytest

from expense_ledger.repositories import ExpenseRepository
from expense_ledger.services import ExpenseService, SchemaService
from expense_ledger.storage.database import Database


@pytest.fixture
def database(tmp_path) -> Database:
    return Database(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")


@pytest.fixture
def service(database) -> ExpenseService:
    return ExpenseService(
        database=database,
        schema_service=SchemaService(),
        expense_repository=ExpenseRepository(),
    )
