class LedgerError(Exception):
    """Base class for failures that abort a ledger command."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class StorageError(LedgerError):
    """Connection, query or DDL failure reported by the database."""


class InvalidInputError(LedgerError):
    """Command argument that cannot be coerced into a column value."""
