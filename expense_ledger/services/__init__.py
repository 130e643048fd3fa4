from .schema_service import SchemaService
from .expense_service import ExpenseService
__all__=[
    "SchemaService",
    "ExpenseService",
]
