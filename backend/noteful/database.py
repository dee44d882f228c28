"""
Noteful Backend — Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` object owns the engine and session factory. The app
       factory builds one, stores it on `app.state`, and the `get_db_session`
       dependency opens a session per request from whatever instance the
       running app carries.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Database is created with the app; sessions are created per-request;
       the engine is disposed in the lifespan shutdown hook.

Why not a module-level engine:
    Tests build an isolated in-memory database for every test and hand it
    to `create_app()`. Nothing in the request path reaches for a global.

Connection Pooling Strategy:
    PostgreSQL: pool_size + max_overflow, pre-ping, hourly recycle.
    SQLite:     StaticPool, one shared connection. An in-memory SQLite
                database only exists for the lifetime of its connection,
                so every session must see the same one.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class so they share a single metadata
    object, which `Database.create_all()` uses to build the schema.
    """
    pass


class Database:
    """
    Owns the async engine and the session factory for one database.

    Attributes:
        url:             The SQLAlchemy URL this instance connects to
        engine:          AsyncEngine managing the connection pool
        session_factory: async_sessionmaker producing AsyncSession objects
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        engine_options: Dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            engine_options["poolclass"] = StaticPool
            engine_options["connect_args"] = {"check_same_thread": False}
        else:
            engine_options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=3600,
            )
        self.engine: AsyncEngine = create_async_engine(url, **engine_options)

        # expire_on_commit=False: returned ORM objects stay readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings) -> "Database":
        """Builds a Database from a Settings object."""
        return cls(
            settings.active_database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yields a session that commits on success and rolls back on error.

        Any exception is re-raised after rollback so the global error
        handlers still see it.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Creates every table registered on `Base.metadata`."""
        # Models register themselves with Base on import
        from noteful.models import folder, note  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """Runs SELECT 1; used by the health check."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        """
        What:  Gracefully closes all connections in the pool.
        When:  Called during application shutdown (lifespan handler).
        """
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session comes from the Database attached to the running app, so a
    test app and a production app never share connections.

    Example usage in a route:
        @router.get("/folders")
        async def list_folders(db: AsyncSession = Depends(get_db_session)):
            return await folder_gateway.list_all(db)
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
