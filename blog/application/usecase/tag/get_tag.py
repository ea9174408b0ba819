"""Get tag use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import TagService
from blog.domain.value import TagId

from .list_tags import TagItem


class GetTagRequest(BaseModel):
    """Get tag request."""

    tag_id: str  # UUID string


class GetTagUseCase:
    """Use case for retrieving one tag with its usage count."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> Optional[TagItem]:
        """Return the tag, or None if it doesn't exist."""
        tag = await self.tag_service.get_tag(TagId(UUID(request.tag_id)))
        return TagItem.from_tag(tag) if tag else None
