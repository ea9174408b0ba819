"""Delete tag use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import TagService
from blog.domain.value import TagId


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    tag_id: str  # UUID string


class DeleteTagUseCase:
    """Use case for deleting a tag and detaching it from its posts."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> bool:
        """Delete the tag; False if it doesn't exist."""
        return await self.tag_service.delete_tag(TagId(UUID(request.tag_id)))
