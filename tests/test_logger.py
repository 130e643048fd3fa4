from __future__ import annotations

import logging

from expense_ledger.core.logger import build_logger


def test_logger_level_and_single_handler():
    log = build_logger("expense-test", "WARNING")
    build_logger("expense-test", "WARNING")
    assert log.level == logging.WARNING
    assert len(log.handlers) == 1
    assert log.propagate is False


def test_debug_forces_debug_level():
    assert build_logger("expense-test-debug", "ERROR", debug=True).level == logging.DEBUG
