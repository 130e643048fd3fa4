from datetime import date
from decimal import Decimal
from typing import Awaitable, Callable, Optional, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from expense_ledger.core.errors import InvalidInputError, StorageError
from expense_ledger.core.logger import logger
from expense_ledger.entities import ExpenseDTO, ExpenseListDTO, OperationResult
from expense_ledger.models import Expense
from expense_ledger.repositories import ExpenseRepository
from expense_ledger.schemas import ExpenseCreate
from expense_ledger.storage.database import Database
from .schema_service import SchemaService

T = TypeVar("T")


def _to_dto(e: Expense) -> ExpenseDTO:
    return ExpenseDTO(
        id=e.id,
        amount=e.amount,
        memo=e.memo,
        created_on=e.created_on,
    )


def _describe(exc: Exception) -> str:
    # DBAPI errors carry the driver's own message in .orig
    text = str(getattr(exc, "orig", None) or exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


class ExpenseService:
    """
    Record Store for the ledger.

    Every operation opens its own session, bootstraps the schema, runs one
    query, commits and closes. Failures are returned, never raised.
    """

    def __init__(
        self,
        database: Database,
        schema_service: SchemaService,
        expense_repository: ExpenseRepository,
        debug: bool = False,
    ) -> None:
        self.database = database
        self.schema_service = schema_service
        self.expense_repo = expense_repository
        self.debug = debug

    async def _execute(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        *,
        bootstrap: bool = True,
    ) -> OperationResult[T]:
        try:
            async with self.database.session() as db:
                if bootstrap:
                    await self.schema_service.ensure_schema(db)
                value = await work(db)
                await db.commit()
        except (SQLAlchemyError, OSError) as e:
            # reported to the operator by the dispatcher
            logger.debug(
                "[ExpenseService] %s failed: %s",
                operation,
                e,
                exc_info=self.debug,
            )
            return OperationResult.failure(StorageError(_describe(e), operation=operation))
        return OperationResult.success(value)

    async def ensure_schema(self) -> OperationResult[bool]:
        """
        Run the schema bootstrap on its own.

        Returns:
            OperationResult whose value tells whether the table was created.
        """
        return await self._execute(
            "ensure_schema",
            self.schema_service.ensure_schema,
            bootstrap=False,
        )

    async def insert(
        self,
        amount: str | Decimal,
        memo: str,
        created_on: Optional[str | date] = None,
    ) -> OperationResult[ExpenseDTO]:
        """
        Add one expense.

        Args:
            amount: Amount as typed by the user, e.g. "14.56".
            memo: Description.
            created_on: Date of the expense; today's date when omitted.

        Returns:
            OperationResult with the stored ExpenseDTO, or an
            InvalidInputError / StorageError failure.
        """
        data = {"amount": amount, "memo": memo}
        if created_on is not None:
            data["created_on"] = created_on
        try:
            payload = ExpenseCreate(**data)
        except ValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(p) for p in err.get("loc", ())) or "input"
            logger.debug("[ExpenseService] Rejected expense input: %s", err)
            return OperationResult.failure(
                InvalidInputError(f"invalid {field}: {err.get('msg')}", operation="insert")
            )

        logger.info("[ExpenseService] Creating expense: %s", payload.model_dump())

        async def _run(db: AsyncSession) -> ExpenseDTO:
            exp = await self.expense_repo.create_expense(payload, session=db)
            logger.info("[ExpenseService] Expense created ID=%s", exp.id)
            return _to_dto(exp)

        return await self._execute("insert", _run)

    async def select_all(self) -> OperationResult[ExpenseListDTO]:
        async def _run(db: AsyncSession) -> ExpenseListDTO:
            rows = await self.expense_repo.list_all(db)
            items = [_to_dto(e) for e in rows]
            return ExpenseListDTO(items=items, count=len(items))

        return await self._execute("select_all", _run)

    async def search(self, term: str) -> OperationResult[ExpenseListDTO]:
        """
        Case-insensitive substring search on the memo.
        """
        logger.info("[ExpenseService] Searching memo for %r", term)

        async def _run(db: AsyncSession) -> ExpenseListDTO:
            rows = await self.expense_repo.search_memo(term, session=db)
            items = [_to_dto(e) for e in rows]
            return ExpenseListDTO(items=items, count=len(items))

        return await self._execute("search", _run)

    async def delete_by_id(self, expense_id: int | str) -> OperationResult[Optional[ExpenseDTO]]:
        """
        Delete one expense.

        Looks the row up first and deletes it only if found. The lookup and
        the delete are separate statements.

        Returns:
            OperationResult whose value is the deleted ExpenseDTO, or None when
            no expense has that id.
        """
        try:
            target = int(str(expense_id).strip())
        except ValueError:
            return OperationResult.failure(
                InvalidInputError(f"'{expense_id}' is not a valid expense id", operation="delete")
            )

        logger.info("[ExpenseService] Deleting expense ID=%s", target)

        async def _run(db: AsyncSession) -> Optional[ExpenseDTO]:
            exp = await self.expense_repo.delete_expense(target, session=db)
            if exp is None:
                logger.info("[ExpenseService] No expense with ID=%s", target)
                return None
            return _to_dto(exp)

        return await self._execute("delete", _run)

    async def delete_all(self) -> OperationResult[int]:
        """
        Remove every expense. Confirmation is the caller's job.

        Returns:
            OperationResult with the number of rows removed.
        """
        logger.info("[ExpenseService] Deleting all expenses")

        async def _run(db: AsyncSession) -> int:
            return await self.expense_repo.delete_all(db)

        return await self._execute("delete_all", _run)
