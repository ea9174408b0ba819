"""Post domain service."""

import logfire

from blog.domain.model.post import Post, PostInput, PostSummary, PostUpdate
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, data: PostInput) -> PostId:
        """Create a post.

        Args:
            data: Title, content and tag names

        Returns:
            New post ID

        Raises:
            ValidationError: If title or content is empty
        """
        with logfire.span("post_service.create_post", title=data.title):
            post_id = await self.post_repository.create(data)
            logfire.info("Post saved", post_id=str(post_id))
            return post_id

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.get_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(
        self, keyword: str | None = None, tag: str | None = None
    ) -> list[PostSummary]:
        """List post summaries, newest first.

        A keyword narrows the list to matching posts; otherwise a tag name
        narrows it to that tag's posts. When both are given the keyword
        wins and the tag is ignored.

        Args:
            keyword: Case-insensitive text to search for in title or content
            tag: Exact tag name

        Returns:
            Post summaries
        """
        with logfire.span("post_service.list_posts", keyword=keyword, tag=tag):
            if keyword is not None:
                posts = await self.post_repository.search(keyword)
            elif tag is not None:
                posts = await self.post_repository.get_by_tag(tag)
            else:
                posts = await self.post_repository.get_all_summaries()

            logfire.info("Posts listed", count=len(posts))
            return posts

    async def update_post(self, post_id: PostId, changes: PostUpdate) -> bool:
        """Apply a partial update.

        Returns:
            True if updated, False if the post does not exist

        Raises:
            ValidationError: If a supplied title or content is empty
        """
        with logfire.span("post_service.update_post", post_id=str(post_id)):
            updated = await self.post_repository.update(post_id, changes)
            if not updated:
                logfire.warn("Post not found for update", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                logfire.warn("Post not found for delete", post_id=str(post_id))
            return deleted

    async def count_posts(self) -> int:
        """Total number of stored posts."""
        return await self.post_repository.count()
