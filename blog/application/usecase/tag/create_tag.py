"""Create tag use case."""

import logfire
from pydantic import BaseModel

from blog.domain.service import TagService

from .list_tags import TagItem


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str


class CreateTagUseCase:
    """Use case for creating a tag, or finding the one that has the name."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> TagItem:
        """Execute create tag flow.

        Args:
            request: Tag name (surrounding whitespace is ignored)

        Returns:
            The new or existing tag with its usage count

        Raises:
            ValidationError: If the name is blank
        """
        with logfire.span("create_tag.execute", tag_name=request.name):
            tag_id = await self.tag_service.create_tag(request.name)
            tag = await self.tag_service.get_tag(tag_id)
            if tag is None:
                raise LookupError(f"Tag vanished after creation: {tag_id}")
            return TagItem.from_tag(tag)
