from .base_repository import BaseRepository
from .expense_repository import ExpenseRepository
__all__ = [
    "BaseRepository",
    "ExpenseRepository",
]
