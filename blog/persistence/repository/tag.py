"""SQL implementation of the Tag repository."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import ValidationError, require_text
from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId, TagId
from blog.persistence.database import Database
from blog.persistence.mappers import row_to_tag
from blog.persistence.tables import post_tags_table, tags_table


class SqlTagRepository(TagRepository):
    """TagRepository backed by a SQLAlchemy database."""

    def __init__(self, database: Database) -> None:
        """Initialize repository with a database handle.

        Args:
            database: Store handle
        """
        self.database = database

    def _tags_with_counts(self):
        return (
            select(
                tags_table.c.id,
                tags_table.c.name,
                func.count(post_tags_table.c.post_id).label("count"),
            )
            .select_from(tags_table)
            .outerjoin(post_tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .group_by(tags_table.c.id, tags_table.c.name)
        )

    async def _find_id_by_name(
        self, session: AsyncSession, name: str
    ) -> Optional[TagId]:
        stmt = select(tags_table.c.id).where(tags_table.c.name == name)
        result = await session.execute(stmt)
        tag_id = result.scalar_one_or_none()
        return TagId(tag_id) if tag_id is not None else None

    async def _exists(self, session: AsyncSession, tag_id: TagId) -> bool:
        stmt = select(tags_table.c.id).where(tags_table.c.id == tag_id)
        result = await session.execute(stmt)
        return result.first() is not None

    async def resolve_or_create_in(self, session: AsyncSession, name: str) -> TagId:
        """Resolve a tag name inside an already open transaction.

        Used by the post repository so tag creation commits or rolls back
        together with the post write.

        Args:
            session: Session of the caller's transaction
            name: Tag name (trimmed before lookup)

        Returns:
            Tag identifier

        Raises:
            ValidationError: If the trimmed name is empty
        """
        trimmed = require_text(name, "Tag name is required").strip()

        existing = await self._find_id_by_name(session, trimmed)
        if existing is not None:
            return existing

        # A concurrent writer may insert the same name first; the conflict is
        # skipped and the lookup below returns the winner's id.
        stmt = self.database.insert_ignoring_conflicts(tags_table, "name").values(
            id=uuid4(), name=trimmed
        )
        await session.execute(stmt)

        tag_id = await self._find_id_by_name(session, trimmed)
        logfire.info("Tag resolved", tag_name=trimmed, tag_id=str(tag_id))
        return tag_id

    async def resolve_or_create(self, name: str) -> TagId:
        """Map a tag name to its identifier, creating the tag on first use."""
        require_text(name, "Tag name is required")
        with logfire.span("tag_repository.resolve_or_create", tag_name=name):
            async with self.database.transaction() as session:
                return await self.resolve_or_create_in(session, name)

    async def get_all(self) -> list[Tag]:
        """List every tag with its usage count."""
        async with self.database.transaction() as session:
            result = await session.execute(self._tags_with_counts())
            tags = [row_to_tag(row._asdict()) for row in result.fetchall()]

        # Code point order for names regardless of database collation
        tags.sort(key=lambda t: (-t.count, t.name))
        return tags

    async def get_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = self._tags_with_counts().where(tags_table.c.id == tag_id)
        async with self.database.transaction() as session:
            result = await session.execute(stmt)
            row = result.fetchone()

        if not row:
            logfire.warn("Tag not found", tag_id=str(tag_id))
            return None
        return row_to_tag(row._asdict())

    async def rename(self, tag_id: TagId, new_name: str) -> bool:
        """Rename a tag, refusing names already held by another tag."""
        if not tag_id:
            raise ValidationError("Tag ID is required")
        trimmed = require_text(new_name, "Tag name is required").strip()

        with logfire.span(
            "tag_repository.rename", tag_id=str(tag_id), tag_name=trimmed
        ):
            async with self.database.transaction() as session:
                if not await self._exists(session, tag_id):
                    logfire.warn("Tag not found for rename", tag_id=str(tag_id))
                    return False

                holder = await self._find_id_by_name(session, trimmed)
                if holder is not None and holder != tag_id:
                    raise ValidationError(f"Tag name already in use: {trimmed}")

                await session.execute(
                    update(tags_table)
                    .where(tags_table.c.id == tag_id)
                    .values(name=trimmed)
                )

            logfire.info("Tag renamed", tag_id=str(tag_id), tag_name=trimmed)
            return True

    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag together with all of its post associations."""
        with logfire.span("tag_repository.delete", tag_id=str(tag_id)):
            async with self.database.transaction() as session:
                if not await self._exists(session, tag_id):
                    logfire.warn("Tag not found for delete", tag_id=str(tag_id))
                    return False

                await session.execute(
                    delete(post_tags_table).where(post_tags_table.c.tag_id == tag_id)
                )
                await session.execute(
                    delete(tags_table).where(tags_table.c.id == tag_id)
                )

            logfire.info("Tag deleted", tag_id=str(tag_id))
            return True

    async def posts_by_tag_name(self, name: str) -> set[PostId]:
        """Find the posts labelled with a tag."""
        trimmed = name.strip()
        if not trimmed:
            return set()

        stmt = (
            select(post_tags_table.c.post_id)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(tags_table.c.name == trimmed)
        )
        async with self.database.transaction() as session:
            result = await session.execute(stmt)
            return {PostId(post_id) for post_id in result.scalars().all()}
