from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict

from fastapi import Request
from sqlalchemy import event, select, func
from sqlalchemy.engine.url import make_url, URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from retailpos.core.settings import Settings
from retailpos.utils.tx import unit_of_work
from retailpos.v1_0.models import Base


def normalize_url(raw: str) -> str:
    """
    Postgres URLs are rebuilt without query so nothing like sslmode or
    channel_binding reaches asyncpg. Other async URLs pass through untouched.
    """
    u = make_url(raw)
    if u.drivername in ("postgres", "postgresql", "postgresql+psycopg2", "postgresql+asyncpg"):
        clean_url: URL = URL.create(
            drivername="postgresql+asyncpg",
            username=u.username,
            password=u.password,
            host=u.host,
            port=u.port,
            database=u.database,
        )
        return clean_url.render_as_string(hide_password=False)
    return u.render_as_string(hide_password=False)


def _serialize_sqlite_writers(engine: AsyncEngine) -> None:
    """
    SQLite ignores FOR UPDATE. Start every transaction with BEGIN IMMEDIATE
    instead, so a second unit of work waits for the first to finish before
    it reads any stock.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # the driver must not emit its own BEGIN
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """
    Owns the connection pool and the session factory for one application.

    Built once by the container at startup and disposed at shutdown; nothing
    else in the codebase creates engines.
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        isolation_level: str | None = None,
    ) -> None:
        self.url = normalize_url(url)
        self.dialect = make_url(self.url).get_backend_name()

        kwargs: Dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if self.dialect == "sqlite":
            kwargs["connect_args"] = {"timeout": 15}
            if make_url(self.url).database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
            )
            if isolation_level:
                kwargs["execution_options"] = {"isolation_level": isolation_level}

        self.engine: AsyncEngine = create_async_engine(self.url, **kwargs)
        if self.dialect == "sqlite":
            _serialize_sqlite_writers(self.engine)
        self.session_factory = async_sessionmaker(
            bind=self.engine, expire_on_commit=False, autoflush=False, class_=AsyncSession
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncGenerator[AsyncSession, None]:
        """Fresh session wrapped in one atomic scope."""
        async with self.session_factory() as session:
            async with unit_of_work(session):
                yield session

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> datetime:
        async with self.session_factory() as session:
            return await session.scalar(select(func.now()))

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_database(settings: Settings) -> Database:
    return Database(
        settings.DATABASE_URL.get_secret_value(),
        echo=bool(getattr(settings, "DEBUG", False)),
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        isolation_level=settings.DB_ISOLATION_LEVEL,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.container.database()
    session: AsyncSession = database.session()
    try:
        yield session
    finally:
        await session.close()
