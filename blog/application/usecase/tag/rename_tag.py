"""Rename tag use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import TagService
from blog.domain.value import TagId

from .list_tags import TagItem


class RenameTagRequest(BaseModel):
    """Rename tag request."""

    tag_id: str  # UUID string
    name: str


class RenameTagUseCase:
    """Use case for renaming a tag."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: RenameTagRequest) -> Optional[TagItem]:
        """Rename the tag.

        Returns:
            The renamed tag, or None if it doesn't exist

        Raises:
            ValidationError: If the name is blank or used by another tag
        """
        tag_id = TagId(UUID(request.tag_id))
        if not await self.tag_service.rename_tag(tag_id, request.name):
            return None

        tag = await self.tag_service.get_tag(tag_id)
        return TagItem.from_tag(tag) if tag else None
