from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from expense_ledger.core.errors import LedgerError

T = TypeVar("T")

@dataclass(slots=True)
class OperationResult(Generic[T]):
    """Outcome of one Record Store operation: a value or a typed failure."""
    value: Optional[T] = None
    error: Optional[LedgerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> "OperationResult[T]":
        return cls(error=error)
