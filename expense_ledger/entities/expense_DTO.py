from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List

@dataclass(slots=True)
class ExpenseDTO:
    id: int
    amount: Decimal
    memo: str
    created_on: date

@dataclass(slots=True)
class ExpenseListDTO:
    """Rows of a list/search plus their count."""
    items: List[ExpenseDTO] = field(default_factory=list)
    count: int = 0
