from __future__ import annotations

from expense_ledger.app_containers import ApplicationContainer
from expense_ledger.cli import HELP_TEXT
from expense_ledger.main import main
from expense_ledger.repositories import ExpenseRepository
from expense_ledger.services import ExpenseService, SchemaService
from expense_ledger.storage.database import Database


def test_main_without_arguments_prints_help(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == HELP_TEXT


def test_main_runs_commands_end_to_end(tmp_path, capsys):
    container = ApplicationContainer()
    container.expense_service.override(
        ExpenseService(
            database=Database(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"),
            schema_service=SchemaService(),
            expense_repository=ExpenseRepository(),
        )
    )

    assert main(["add", "10.00", "Coffee", "2026-10-01"], container=container) == 0
    assert main(["add", "20.50", "Groceries", "2026-10-02"], container=container) == 0
    assert main(["add", "5.25", "coffee filters", "2026-10-03"], container=container) == 0
    capsys.readouterr()

    assert main(["list"], container=container) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "There are 3 expenses"
    assert lines[1] == "  1 | Thu Oct 01 2026 |        10.00 | Coffee"
    assert lines[-1] == "Total " + "35.75".rjust(30)

    assert main(["search", "COFFEE"], container=container) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "There are 2 expenses"
    assert lines[-1] == "Total " + "15.25".rjust(30)


def test_main_reports_storage_failure(tmp_path, capsys):
    container = ApplicationContainer()
    container.database.override(Database(f"sqlite+aiosqlite:///{tmp_path / 'nope' / 'ledger.db'}"))

    assert main(["list"], container=container) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: select_all:" in captured.err
