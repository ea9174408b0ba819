"""Database connection and transaction management.

A `Database` is the explicit store handle passed to every repository. Each
public repository operation runs inside one `Database.transaction()`.
"""

import os
import shutil
import sys
import tempfile
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import logfire
from sqlalchemy import Table, event, insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from blog.config import Settings

DEFAULT_BUSY_TIMEOUT = 30.0


def create_engine(
    url: str, echo: bool = False, busy_timeout: float = DEFAULT_BUSY_TIMEOUT
) -> AsyncEngine:
    """Create async database engine.

    SQLite transactions start with BEGIN IMMEDIATE, so concurrent writers
    queue on the write lock for up to `busy_timeout` seconds instead of
    failing with "database is locked". Foreign keys are enforced.

    A `:memory:` SQLite URL shares one connection between all sessions and
    therefore suits a single caller at a time; use a file for parallel use.

    Args:
        url: SQLAlchemy async database URL
        echo: Log SQL statements
        busy_timeout: Seconds a SQLite connection waits for the write lock

    Returns:
        Configured async engine
    """
    if make_url(url).get_backend_name() != "sqlite":
        return create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=5,
            max_overflow=10,
        )

    kwargs: dict[str, Any] = {"connect_args": {"timeout": busy_timeout}}
    if make_url(url).database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, echo=echo, **kwargs)
    _configure_sqlite(engine)
    return engine


def _configure_sqlite(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Let SQLAlchemy emit BEGIN itself so reads share the write transaction
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        # Take the write lock up front; a deferred BEGIN would let two
        # transactions read and then deadlock upgrading to write.
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


class Database:
    """Store handle shared by the repositories."""

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize database handle.

        Args:
            engine: Async engine to run statements on
        """
        self.engine = engine
        self.session_factory = create_session_factory(engine)
        self._temporary_dir: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle from application settings."""
        return cls(
            create_engine(
                settings.database.url,
                echo=settings.debug or settings.database.echo,
                busy_timeout=settings.database.busy_timeout,
            )
        )

    @classmethod
    def temporary(cls) -> "Database":
        """Build an isolated SQLite database in a fresh temporary directory.

        Behaves like the default file store, parallel writers included.
        The directory is removed by `dispose`.
        """
        directory = tempfile.mkdtemp(prefix="blog-")
        path = os.path.join(directory, "blog.db")
        database = cls(create_engine(f"sqlite+aiosqlite:///{path}"))
        database._temporary_dir = directory
        return database

    @property
    def dialect_name(self) -> str:
        """Name of the SQL dialect, e.g. 'sqlite' or 'postgresql'."""
        return self.engine.dialect.name

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Open a session inside a single transaction.

        Commits when the block exits normally and rolls back on any
        exception. Store failures are recorded and re-raised unchanged.

        Yields:
            Session bound to the transaction
        """
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except SQLAlchemyError as e:
                logfire.error(
                    "Database transaction failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    _exc_info=sys.exc_info(),
                )
                raise

    def insert_ignoring_conflicts(self, table: Table, *index_elements: str):
        """Build an INSERT that silently skips rows hitting a unique index.

        Args:
            table: Target table
            index_elements: Columns of the unique index to check

        Returns:
            Insert statement for the current dialect
        """
        if self.dialect_name == "sqlite":
            return sqlite_insert(table).on_conflict_do_nothing(
                index_elements=list(index_elements)
            )
        if self.dialect_name == "postgresql":
            return postgresql_insert(table).on_conflict_do_nothing(
                index_elements=list(index_elements)
            )
        return insert(table)

    async def dispose(self) -> None:
        """Close all pooled connections and remove temporary files."""
        await self.engine.dispose()
        if self._temporary_dir is not None:
            shutil.rmtree(self._temporary_dir, ignore_errors=True)
            self._temporary_dir = None
