from typing import Any, Optional, Protocol, Sequence, Type, TypeVar, Generic, runtime_checkable
from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# --- models must expose .id ---
@runtime_checkable
class HasId(Protocol):
    id: Any  # PK column

ModelT = TypeVar("ModelT", bound=HasId)


class BaseRepository(Generic[ModelT]):
    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def add(self, entity: ModelT, session: AsyncSession) -> ModelT:
        session.add(entity)
        try:
            await session.flush([entity])
        except IntegrityError:
            await session.rollback()
            raise
        await session.refresh(entity)
        return entity

    async def get_by_id(
        self,
        id_: Any,
        session: AsyncSession,
    ) -> Optional[ModelT]:
        stmt: Select = select(self.model).where(self.model.id == id_)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def list_all(
        self,
        session: AsyncSession,
        *,
        order_by: Any | None = None,
        where: Sequence[Any] = (),
    ) -> list[ModelT]:
        if order_by is None:
            order_by = self.model.id.asc()
        stmt: Select = select(self.model).where(*where).order_by(order_by)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    async def delete(self, entity: ModelT, session: AsyncSession) -> None:
        await session.delete(entity)
        await session.flush()

    async def delete_all(self, session: AsyncSession) -> int:
        res = await session.execute(delete(self.model))
        await session.flush()
        return int(res.rowcount or 0)
