"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from blog.config import ContentSettings, Settings
from blog.domain.repository import PostRepository, TagRepository
from blog.persistence.database import Database
from blog.persistence.repository import SqlPostRepository, SqlTagRepository
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base: supplies the Database handle."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the configured database URL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_database(self, settings: Settings) -> AsyncIterator[Database]:
        """Provide the database handle, disposing its pool on shutdown."""
        database = Database.from_settings(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(database.engine)
        logfire.info("Database opened", dialect=database.dialect_name)
        yield database
        await database.dispose()
        logfire.info("Database closed")


class RepositoryProvider(ProviderBase):
    """Repository provider - concrete, works on whichever Database is provided.

    Repositories open their own transaction per operation, so they live as
    long as the database handle.
    """

    scope = Scope.APP

    @provide
    def get_sql_tag_repository(self, database: Database) -> SqlTagRepository:
        """Provide the SQL tag repository."""
        return SqlTagRepository(database)

    @provide
    def get_tag_repository(self, repository: SqlTagRepository) -> TagRepository:
        """Provide Tag repository."""
        return repository

    @provide
    def get_post_repository(
        self,
        database: Database,
        tag_repository: SqlTagRepository,
        content_settings: ContentSettings,
    ) -> PostRepository:
        """Provide Post repository."""
        return SqlPostRepository(database, tag_repository, content_settings)
