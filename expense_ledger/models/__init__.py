from .base import Base
from .expense import Expense
__all__ = [
    "Base",
    "Expense",
]
