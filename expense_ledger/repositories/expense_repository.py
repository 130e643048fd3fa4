from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from expense_ledger.models import Expense
from expense_ledger.schemas import ExpenseCreate
from .base_repository import BaseRepository

class ExpenseRepository(BaseRepository[Expense]):
    def __init__(self) -> None:
        super().__init__(Expense)

    async def create_expense(
        self,
        payload: ExpenseCreate,
        session: AsyncSession
    ) -> Expense:
        """
        Insert an expense and refresh it so amount/created_on carry the
        values the database actually stored.
        """
        entity = Expense(
            amount=payload.amount,
            memo=payload.memo,
            created_on=payload.created_on,
        )
        await self.add(entity, session)
        return entity

    async def search_memo(
        self,
        term: str,
        session: AsyncSession
    ) -> List[Expense]:
        """
        Rows whose memo contains ``term`` anywhere, ignoring case.
        LIKE wildcards inside the term are escaped and match literally.
        """
        return await self.list_all(
            session,
            where=(Expense.memo.icontains(term, autoescape=True),),
        )

    async def delete_expense(
        self,
        expense_id: int,
        session: AsyncSession
    ) -> Optional[Expense]:
        """
        Delete an expense by ID. Return the deleted row, or None if it did
        not exist.
        """
        entity = await self.get_by_id(expense_id, session)
        if not entity:
            return None
        await self.delete(entity, session)
        return entity
