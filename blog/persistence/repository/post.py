"""SQL implementation of the Post repository."""

from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy import Select, delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import ContentSettings
from blog.domain.error import require_text
from blog.domain.model.post import (
    Post,
    PostInput,
    PostSummary,
    PostUpdate,
    clean_tag_names,
)
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId
from blog.persistence.database import Database
from blog.persistence.mappers import row_to_post, row_to_summary
from blog.persistence.repository.tag import SqlTagRepository
from blog.persistence.tables import post_tags_table, posts_table, tags_table


class SqlPostRepository(PostRepository):
    """PostRepository backed by a SQLAlchemy database."""

    def __init__(
        self,
        database: Database,
        tag_repository: SqlTagRepository,
        content_settings: Optional[ContentSettings] = None,
    ) -> None:
        """Initialize repository.

        Args:
            database: Store handle
            tag_repository: Resolves tag names within post transactions
            content_settings: Excerpt rules for summaries
        """
        self.database = database
        self.tag_repository = tag_repository
        self.content_settings = content_settings or ContentSettings()

    async def _fetch_tags_for_posts(
        self, session: AsyncSession, post_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            session: Open session
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag names
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table.c.name)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await session.execute(stmt)

        post_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.name)

        return post_tag_map

    async def _fetch_summaries(self, stmt: Select) -> List[PostSummary]:
        stmt = stmt.order_by(desc(posts_table.c.created_at))

        async with self.database.transaction() as session:
            result = await session.execute(stmt)
            post_rows = result.fetchall()
            post_tag_map = await self._fetch_tags_for_posts(
                session, [row.id for row in post_rows]
            )

        return [
            row_to_summary(
                row._asdict(),
                tag_names=post_tag_map.get(row.id, []),
                excerpt_length=self.content_settings.excerpt_length,
                excerpt_suffix=self.content_settings.excerpt_suffix,
            )
            for row in post_rows
        ]

    async def _exists(self, session: AsyncSession, post_id: PostId) -> bool:
        stmt = select(posts_table.c.id).where(posts_table.c.id == post_id)
        result = await session.execute(stmt)
        return result.first() is not None

    async def _next_created_at(self, session: AsyncSession) -> datetime:
        """Creation time strictly after every stored post's creation time."""
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        result = await session.execute(select(func.max(posts_table.c.created_at)))
        latest = result.scalar()
        if latest is not None and latest >= now:
            return latest + timedelta(microseconds=1)
        return now

    async def _attach_tags(
        self, session: AsyncSession, post_id: PostId, tag_names: list[str]
    ) -> None:
        for tag_name in tag_names:
            tag_id = await self.tag_repository.resolve_or_create_in(session, tag_name)
            await session.execute(
                insert(post_tags_table).values(post_id=post_id, tag_id=tag_id)
            )

    async def create(self, data: PostInput) -> PostId:
        """Create a post and attach its tags in one transaction."""
        require_text(data.title, "Title and content are required")
        require_text(data.content, "Title and content are required")
        tag_names = clean_tag_names(data.tags)

        post_id = PostId(uuid4())
        with logfire.span(
            "post_repository.create",
            post_id=str(post_id),
            title=data.title,
            tags=tag_names,
        ):
            async with self.database.transaction() as session:
                created_at = await self._next_created_at(session)
                await session.execute(
                    insert(posts_table).values(
                        id=post_id,
                        title=data.title,
                        content=data.content,
                        created_at=created_at,
                    )
                )
                await self._attach_tags(session, post_id, tag_names)

            logfire.info("Post created", post_id=str(post_id))
            return post_id

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.get_by_id", post_id=str(post_id)):
            async with self.database.transaction() as session:
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await session.execute(stmt)
                row = result.fetchone()

                if not row:
                    logfire.warn("Post not found", post_id=str(post_id))
                    return None

                post_tag_map = await self._fetch_tags_for_posts(session, [row.id])

            return row_to_post(row._asdict(), tag_names=post_tag_map.get(row.id, []))

    async def get_all_summaries(self) -> List[PostSummary]:
        """List every post in summary form, newest first."""
        return await self._fetch_summaries(select(posts_table))

    async def update(self, post_id: PostId, changes: PostUpdate) -> bool:
        """Apply a partial update in one transaction."""
        if changes.title is not None:
            require_text(changes.title, "Title must not be empty")
        if changes.content is not None:
            require_text(changes.content, "Content must not be empty")

        with logfire.span(
            "post_repository.update",
            post_id=str(post_id),
            fields=sorted(
                name
                for name in ("title", "content", "tags")
                if getattr(changes, name) is not None
            ),
        ):
            async with self.database.transaction() as session:
                if not await self._exists(session, post_id):
                    logfire.warn("Post not found for update", post_id=str(post_id))
                    return False

                if changes.changes_columns:
                    values = {}
                    if changes.title is not None:
                        values["title"] = changes.title
                    if changes.content is not None:
                        values["content"] = changes.content
                    await session.execute(
                        update(posts_table)
                        .where(posts_table.c.id == post_id)
                        .values(**values)
                    )

                if changes.tags is not None:
                    await session.execute(
                        delete(post_tags_table).where(
                            post_tags_table.c.post_id == post_id
                        )
                    )
                    await self._attach_tags(
                        session, post_id, clean_tag_names(changes.tags)
                    )

            logfire.info("Post updated", post_id=str(post_id))
            return True

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its tag associations in one transaction."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            async with self.database.transaction() as session:
                if not await self._exists(session, post_id):
                    logfire.warn("Post not found for delete", post_id=str(post_id))
                    return False

                await session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                )
                await session.execute(
                    delete(posts_table).where(posts_table.c.id == post_id)
                )

            logfire.info("Post deleted", post_id=str(post_id))
            return True

    async def search(self, keyword: str) -> List[PostSummary]:
        """Find posts whose title or content contains a keyword."""
        with logfire.span("post_repository.search", keyword=keyword):
            stmt = select(posts_table).where(
                or_(
                    posts_table.c.title.icontains(keyword, autoescape=True),
                    posts_table.c.content.icontains(keyword, autoescape=True),
                )
            )
            posts = await self._fetch_summaries(stmt)
            logfire.info("Search finished", keyword=keyword, count=len(posts))
            return posts

    async def get_by_tag(self, tag_name: str) -> List[PostSummary]:
        """List posts labelled with the tag named exactly `tag_name`."""
        with logfire.span("post_repository.get_by_tag", tag=tag_name):
            stmt = (
                select(posts_table)
                .select_from(posts_table)
                .join(post_tags_table, posts_table.c.id == post_tags_table.c.post_id)
                .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name == tag_name)
            )
            return await self._fetch_summaries(stmt)

    async def count(self) -> int:
        """Count all stored posts."""
        async with self.database.transaction() as session:
            result = await session.execute(
                select(func.count()).select_from(posts_table)
            )
            return result.scalar() or 0
