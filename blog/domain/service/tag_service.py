"""Tag domain service."""

import logfire

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId, TagId

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def create_tag(self, name: str) -> TagId:
        """Get the tag with this name, creating it if needed.

        Args:
            name: Tag name

        Returns:
            Identifier of the (possibly pre-existing) tag

        Raises:
            ValidationError: If the name is blank
        """
        with logfire.span("tag_service.create_tag", tag_name=name):
            tag_id = await self.tag_repository.resolve_or_create(name)
            logfire.info("Tag ready", tag_id=str(tag_id))
            return tag_id

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags, most used first."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.get_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_tag(self, tag_id: TagId) -> Tag | None:
        """Get a tag by ID.

        Args:
            tag_id: Tag ID

        Returns:
            Tag if found, None otherwise
        """
        with logfire.span("tag_service.get_tag", tag_id=str(tag_id)):
            tag = await self.tag_repository.get_by_id(tag_id)
            if tag:
                logfire.info("Tag found", tag_id=str(tag_id), tag_name=tag.name)
            else:
                logfire.warn("Tag not found", tag_id=str(tag_id))
            return tag

    async def rename_tag(self, tag_id: TagId, name: str) -> bool:
        """Rename a tag.

        Returns:
            True if renamed, False if the tag does not exist

        Raises:
            ValidationError: If the name is blank or used by another tag
        """
        with logfire.span("tag_service.rename_tag", tag_id=str(tag_id), tag_name=name):
            return await self.tag_repository.rename(tag_id, name)

    async def delete_tag(self, tag_id: TagId) -> bool:
        """Delete a tag and detach it from every post."""
        with logfire.span("tag_service.delete_tag", tag_id=str(tag_id)):
            return await self.tag_repository.delete(tag_id)

    async def get_post_ids(self, name: str) -> set[PostId]:
        """IDs of the posts labelled with the named tag."""
        with logfire.span("tag_service.get_post_ids", tag_name=name):
            post_ids = await self.tag_repository.posts_by_tag_name(name)
            logfire.info("Posts for tag", tag_name=name, count=len(post_ids))
            return post_ids
