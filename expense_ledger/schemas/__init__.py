from .expense_schema import ExpenseCreate

__all__ = ["ExpenseCreate"]
