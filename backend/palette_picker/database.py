"""
Palette Picker Backend — Database Lifecycle & Session Management
==================================================================

What:  The `Database` object owning the async SQLAlchemy engine and session
       factory, the declarative `Base`, and the per-request session dependency.
Why:   Handlers never reach for a module-level connection handle. One `Database`
       is constructed by the app factory, opened in the lifespan, handed to each
       request through FastAPI's dependency system, and closed on shutdown.
How:   `open()` builds the engine lazily from a URL; `session()` yields
       AsyncSession instances; `close()` disposes every pooled connection.
Who:   Created by `create_app()`; tests construct their own against SQLite.
When:  Opened once per process; a session is created per request.

Connection Pooling Strategy:
    PostgreSQL (asyncpg):  pool_size / max_overflow / pre_ping from settings,
                           connections recycled hourly.
    SQLite (aiosqlite):    driver defaults; pool options are not accepted by
                           SQLite pools. Foreign keys are switched on for every
                           connection so referential integrity matches Postgres.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers every table with a shared metadata object, which Alembic
    reads for migrations and tests use for `create_all()`.
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Process-scoped handle to the relational store.

    Lifecycle:
        db = Database(url)
        db.open()                     # builds the engine (no connection yet)
        async with db.session() as s: # one session per unit of work
            ...
        await db.close()              # disposes the pool

    Opening twice is a no-op, so an app factory can receive an
    already-opened instance (tests) and the lifespan can still call open().
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_pre_ping = pool_pre_ping
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.url).get_backend_name() == "sqlite"

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not open; call open() first")
        return self._engine

    def open(self) -> None:
        """
        Build the engine and session factory.

        What:  Creates the async engine with pool options suited to the backend.
        Why:   Kept out of __init__ so constructing a Database never needs the
               driver installed or the server reachable.
        """
        if self._engine is not None:
            return

        if self.is_sqlite:
            engine = create_async_engine(self.url, echo=self.echo)
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_async_engine(
                self.url,
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_pre_ping=self.pool_pre_ping,
                pool_recycle=3600,
                echo=self.echo,
            )

        # expire_on_commit=False: rows stay readable after the request commits
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._engine = engine
        logger.info("Database engine created for %s", make_url(self.url).render_as_string(hide_password=True))

    def session(self) -> AsyncSession:
        """Return a new AsyncSession; use it as an async context manager."""
        if self._session_factory is None:
            raise RuntimeError("Database is not open; call open() first")
        return self._session_factory()

    async def create_all(self) -> None:
        """Create every table known to Base.metadata (tests and local bootstrap)."""
        # Models register themselves with Base on import
        from palette_picker.models import palette, project  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run SELECT 1; True when the store answers."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def close(self) -> None:
        """
        What:  Gracefully closes all connections in the pool.
        When:  Called during application shutdown (lifespan handler).
        """
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Takes the Database attached to the running app (app.state.database)
        2. Yields a fresh session to the route handler
        3. On success: commits the single statement the handler issued
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/projects")
        async def get_projects(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
