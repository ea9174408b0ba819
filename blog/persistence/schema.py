"""Schema provisioning.

`ensure_schema` replaces migrations for this store: the three tables are
created with IF NOT EXISTS, so it can run on every start-up.
"""

import logfire
from sqlalchemy.schema import CreateIndex, CreateTable

from blog.persistence.database import Database
from blog.persistence.tables import metadata


async def ensure_schema(database: Database) -> None:
    """Create the posts, tags and post_tags tables if they are absent.

    Safe to call repeatedly and from several processes at once.

    Args:
        database: Target database
    """
    with logfire.span("schema.ensure_schema", dialect=database.dialect_name):
        async with database.engine.begin() as conn:
            for table in metadata.sorted_tables:
                await conn.execute(CreateTable(table, if_not_exists=True))
                for index in table.indexes:
                    await conn.execute(CreateIndex(index, if_not_exists=True))
        logfire.info("Schema ensured", tables=list(metadata.tables))
