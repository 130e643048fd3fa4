from .expense_DTO import ExpenseDTO, ExpenseListDTO
from .result import OperationResult


__all__ = [
    "ExpenseDTO", "ExpenseListDTO",
    "OperationResult",
]
