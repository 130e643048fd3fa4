from __future__ import annotations

import asyncio
import logging
from datetime import date
from decimal import Decimal

from expense_ledger.core.errors import InvalidInputError, StorageError
from expense_ledger.repositories import ExpenseRepository
from expense_ledger.services import ExpenseService, SchemaService
from expense_ledger.storage.database import Database


def _all(service):
    result = asyncio.run(service.select_all())
    assert result.ok
    return result.value


def test_ensure_schema_twice_keeps_table(service):
    first = asyncio.run(service.ensure_schema())
    second = asyncio.run(service.ensure_schema())
    assert first.ok and first.value is True
    assert second.ok and second.value is False

    asyncio.run(service.insert("1.00", "coffee", "2026-10-01"))
    asyncio.run(service.ensure_schema())
    assert _all(service).count == 1


def test_operations_bootstrap_fresh_database(service):
    listing = _all(service)
    assert listing.count == 0
    assert listing.items == []


def test_insert_round_trip(service):
    before = _all(service).count
    result = asyncio.run(service.insert("14.56", "Pencils", "2026-10-19"))
    assert result.ok
    inserted = result.value
    assert inserted.amount == Decimal("14.56")
    assert inserted.memo == "Pencils"
    assert inserted.created_on == date(2026, 10, 19)

    listing = _all(service)
    assert listing.count == before + 1
    row = listing.items[-1]
    assert row.id == inserted.id
    assert row.amount == Decimal("14.56")
    assert row.memo == "Pencils"
    assert row.created_on == date(2026, 10, 19)


def test_insert_defaults_to_today(service):
    result = asyncio.run(service.insert("3.5", "Bus ticket"))
    assert result.ok
    assert result.value.created_on == date.today()
    assert result.value.amount == Decimal("3.50")


def test_insert_rejects_malformed_amount(service):
    result = asyncio.run(service.insert("twelve", "Lunch"))
    assert not result.ok
    assert isinstance(result.error, InvalidInputError)
    assert _all(service).count == 0


def test_insert_rejects_malformed_date(service):
    result = asyncio.run(service.insert("12.00", "Lunch", "not-a-date"))
    assert not result.ok
    assert isinstance(result.error, InvalidInputError)


def test_search_is_case_insensitive_substring(service):
    for amount, memo in [("10.00", "Coffee beans"), ("4.20", "iced COFFEE"), ("30.00", "Gas")]:
        assert asyncio.run(service.insert(amount, memo, "2026-10-01")).ok

    result = asyncio.run(service.search("coffee"))
    assert result.ok
    memos = sorted(e.memo for e in result.value.items)
    assert memos == ["Coffee beans", "iced COFFEE"]
    assert result.value.count == 2

    result = asyncio.run(service.search("offe"))
    assert result.value.count == 2

    result = asyncio.run(service.search("tea"))
    assert result.value.count == 0


def test_search_treats_wildcards_literally(service):
    asyncio.run(service.insert("1.00", "100% juice", "2026-10-01"))
    asyncio.run(service.insert("2.00", "1000 sheets", "2026-10-01"))

    result = asyncio.run(service.search("0%"))
    assert [e.memo for e in result.value.items] == ["100% juice"]


def test_delete_existing_expense(service):
    keep = asyncio.run(service.insert("5.00", "keep", "2026-10-01")).value
    drop = asyncio.run(service.insert("7.25", "drop", "2026-10-02")).value

    result = asyncio.run(service.delete_by_id(drop.id))
    assert result.ok
    assert result.value.id == drop.id
    assert result.value.memo == "drop"
    assert result.value.amount == Decimal("7.25")

    listing = _all(service)
    assert listing.count == 1
    assert [e.id for e in listing.items] == [keep.id]


def test_delete_missing_expense_leaves_table(service):
    asyncio.run(service.insert("5.00", "keep", "2026-10-01"))
    result = asyncio.run(service.delete_by_id(999))
    assert result.ok
    assert result.value is None
    assert _all(service).count == 1


def test_delete_accepts_numeric_text_and_rejects_garbage(service):
    created = asyncio.run(service.insert("5.00", "keep", "2026-10-01")).value
    assert asyncio.run(service.delete_by_id(str(created.id))).value.id == created.id

    result = asyncio.run(service.delete_by_id("abc"))
    assert not result.ok
    assert isinstance(result.error, InvalidInputError)


def test_ids_are_not_reused_after_delete(service):
    asyncio.run(service.insert("1.00", "first", "2026-10-01"))
    second = asyncio.run(service.insert("2.00", "second", "2026-10-01")).value
    asyncio.run(service.delete_by_id(second.id))

    third = asyncio.run(service.insert("3.00", "third", "2026-10-01")).value
    assert third.id > second.id


def test_delete_all_empties_table(service):
    for i in range(3):
        asyncio.run(service.insert(f"{i}.50", f"item {i}", "2026-10-01"))

    result = asyncio.run(service.delete_all())
    assert result.ok
    assert _all(service).count == 0

    assert asyncio.run(service.delete_all()).ok


def test_storage_failure_is_returned_not_raised(tmp_path):
    broken = ExpenseService(
        database=Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'ledger.db'}"),
        schema_service=SchemaService(),
        expense_repository=ExpenseRepository(),
    )
    result = asyncio.run(broken.select_all())
    assert not result.ok
    assert isinstance(result.error, StorageError)
    assert result.error.operation == "select_all"


def test_insert_accepts_short_date_forms(service):
    for text in ["10/19/2026", "10/19/26", "19.10.2026", "Oct 19 2026", "Mon Oct 19 2026", "October 19, 2026"]:
        result = asyncio.run(service.insert("12.00", "Lunch", text))
        assert result.ok, text
        assert result.value.created_on == date(2026, 10, 19)


def test_deletes_and_failures_stay_below_warning(service, tmp_path):
    from expense_ledger.core.logger import logger

    records: list[logging.LogRecord] = []
    handler = logging.Handler()
    handler.emit = records.append
    logger.addHandler(handler)
    try:
        created = asyncio.run(service.insert("1.00", "tea", "2026-10-01")).value
        asyncio.run(service.delete_by_id(created.id))
        asyncio.run(service.delete_all())
        broken = ExpenseService(
            database=Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'ledger.db'}"),
            schema_service=SchemaService(),
            expense_repository=ExpenseRepository(),
        )
        assert not asyncio.run(broken.select_all()).ok
    finally:
        logger.removeHandler(handler)

    assert [r for r in records if r.levelno >= logging.WARNING] == []
