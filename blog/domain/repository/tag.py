"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.value import PostId, TagId


class TagRepository(ABC):
    """Repository interface for Tag identity and usage."""

    @abstractmethod
    async def resolve_or_create(self, name: str) -> TagId:
        """Map a tag name to its identifier, creating the tag on first use.

        The name is trimmed before lookup. Repeated calls with the same
        trimmed name always return the same identifier.

        Args:
            name: Tag name

        Returns:
            Identifier of the existing or newly created tag

        Raises:
            ValidationError: If the trimmed name is empty
        """
        pass

    @abstractmethod
    async def get_all(self) -> list[Tag]:
        """List every tag with its usage count.

        Returns:
            Tags ordered by descending count, then ascending name
        """
        pass

    @abstractmethod
    async def get_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag with its usage count if found, None otherwise
        """
        pass

    @abstractmethod
    async def rename(self, tag_id: TagId, new_name: str) -> bool:
        """Rename a tag.

        Args:
            tag_id: Tag identifier
            new_name: New name (trimmed before storing)

        Returns:
            True if renamed, False if the tag does not exist

        Raises:
            ValidationError: If the ID or trimmed name is empty, or another
                tag already uses the name
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag together with all of its post associations.

        Args:
            tag_id: Tag identifier

        Returns:
            True if deleted, False if the tag does not exist
        """
        pass

    @abstractmethod
    async def posts_by_tag_name(self, name: str) -> set[PostId]:
        """Find the posts labelled with a tag.

        Args:
            name: Tag name (trimmed before lookup)

        Returns:
            IDs of associated posts, empty if no such tag exists
        """
        pass
