from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Dict

from sqlalchemy.engine.url import make_url, URL
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool


def build_connect_args(url: URL, *, ssl: bool = False) -> Dict[str, Any]:
    """
    Arguments handed to the DBAPI connect() call.

    Only asyncpg receives anything; other drivers (aiosqlite in tests) get an
    empty dict.
    """
    if url.get_driver_name() != "asyncpg":
        return {}
    return {
        "ssl": ssl,
        "statement_cache_size": 0,   # evita prepared stmts con PgBouncer
    }


class Database:
    """
    Connection target for one ledger invocation.

    Holds only the connection parameters. Every call to ``session()`` builds a
    fresh engine, hands out a single session and releases both on exit, so no
    connection outlives the operation that opened it.
    """

    def __init__(self, url: URL | str, *, echo: bool = False, ssl: bool = False) -> None:
        self.url: URL = make_url(url) if isinstance(url, str) else url
        self.echo = echo
        self.connect_args = build_connect_args(self.url, ssl=ssl)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        engine = create_async_engine(
            self.url.render_as_string(hide_password=False),
            echo=self.echo,
            poolclass=NullPool,
            connect_args=self.connect_args,
        )
        session_factory = async_sessionmaker(
            bind=engine, expire_on_commit=False, autoflush=False, class_=AsyncSession
        )
        session: AsyncSession = session_factory()
        try:
            yield session
        finally:
            await session.close()
            await engine.dispose()
