"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post, PostInput, PostSummary, PostUpdate
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(self, data: PostInput) -> PostId:
        """Create a post and attach its tags.

        Args:
            data: Title, content and optional tag names

        Returns:
            The new post's identifier

        Raises:
            ValidationError: If title or content is empty
        """
        pass

    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post with its tag names if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all_summaries(self) -> List[PostSummary]:
        """List every post in summary form, newest first."""
        pass

    @abstractmethod
    async def update(self, post_id: PostId, changes: PostUpdate) -> bool:
        """Apply a partial update.

        Args:
            post_id: The post to update
            changes: Fields to overwrite; absent fields are preserved

        Returns:
            True if updated, False if the post does not exist

        Raises:
            ValidationError: If a supplied title or content is empty
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its tag associations.

        Args:
            post_id: The post to delete

        Returns:
            True if deleted, False if the post does not exist
        """
        pass

    @abstractmethod
    async def search(self, keyword: str) -> List[PostSummary]:
        """Find posts whose title or content contains a keyword.

        Matching is a case-insensitive substring test.

        Args:
            keyword: Text to look for

        Returns:
            Matching posts in summary form, newest first
        """
        pass

    @abstractmethod
    async def get_by_tag(self, tag_name: str) -> List[PostSummary]:
        """List posts labelled with the tag named exactly `tag_name`.

        Args:
            tag_name: Stored tag name (not trimmed)

        Returns:
            Posts in summary form, newest first; empty if no such tag
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all stored posts."""
        pass
