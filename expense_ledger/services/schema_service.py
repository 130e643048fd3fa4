from sqlalchemy import Table, inspect
from sqlalchemy.ext.asyncio import AsyncSession

from expense_ledger.core.logger import logger
from expense_ledger.models import Expense


class SchemaService:
    """
    Bootstrap of the ``expenses`` table.

    The check runs against the live database every time; nothing is cached in
    the process, so a second invocation against an existing table is a no-op.
    """

    def __init__(self, table: Table = Expense.__table__) -> None:
        self.table = table

    async def table_exists(self, db: AsyncSession) -> bool:
        """
        Whether the table exists in the connection's default schema.
        """
        conn = await db.connection()
        return await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table(self.table.name)
        )

    async def ensure_schema(self, db: AsyncSession) -> bool:
        """
        Create the table if it is missing.

        Args:
            db: Open session; the DDL joins its transaction and is committed
                together with the operation that follows.

        Returns:
            True if the table was created, False if it already existed.

        Raises:
            SQLAlchemyError: On connection or DDL failure.
        """
        if await self.table_exists(db):
            logger.debug("[SchemaService] table %s present", self.table.name)
            return False

        conn = await db.connection()
        await conn.run_sync(lambda sync_conn: self.table.create(sync_conn, checkfirst=True))
        logger.info("[SchemaService] created table %s", self.table.name)
        return True
