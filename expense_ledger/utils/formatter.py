from decimal import Decimal
from typing import Iterable, List

from expense_ledger.entities import ExpenseDTO, ExpenseListDTO

SEPARATOR = "-" * 50
DATE_FORMAT = "%a %b %d %Y"


def count_line(count: int) -> str:
    if count == 0:
        return "there are no expenses"
    if count == 1:
        return "There is 1 expense"
    return f"There are {count} expenses"


def format_row(expense: ExpenseDTO) -> str:
    return " | ".join([
        f"{expense.id:>3}",
        f"{expense.created_on.strftime(DATE_FORMAT):>10}",
        f"{Decimal(expense.amount):>12.2f}",
        expense.memo,
    ])


def total_amount(expenses: Iterable[ExpenseDTO]) -> Decimal:
    return sum((Decimal(e.amount) for e in expenses), Decimal("0"))


def total_lines(expenses: Iterable[ExpenseDTO]) -> List[str]:
    """Separator plus the summed amount, aligned under the amount column."""
    return [SEPARATOR, f"Total {total_amount(expenses):>30.2f}"]


def render_listing(listing: ExpenseListDTO, min_rows_for_total: int = 1) -> List[str]:
    """
    Lines for a list or search result.

    Args:
        listing: Rows and their count.
        min_rows_for_total: Smallest row count that gets a total line
            (1 for list, 2 for search).
    """
    lines = [count_line(listing.count)]
    lines.extend(format_row(e) for e in listing.items)
    if listing.count and listing.count >= min_rows_for_total:
        lines.extend(total_lines(listing.items))
    return lines


def render_deleted(expense: ExpenseDTO) -> List[str]:
    return ["The following expense has been deleted:", format_row(expense)]


def render_missing(expense_id: int | str) -> List[str]:
    return [f"There is no expense with the id '{expense_id}'."]
