"""List tags use case."""

import logfire
from pydantic import BaseModel

from blog.domain.model.tag import Tag
from blog.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    id: str
    name: str
    count: int

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        """Build the item from a domain tag."""
        return cls(id=str(tag.id), name=tag.name, count=tag.count)


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing tags with usage counts."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Every tag, most used first, ties broken by name
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.get_all_tags()
            tag_items = [TagItem.from_tag(tag) for tag in tags]

            logfire.info("Tags listed", count=len(tag_items))
            return ListTagsResponse(tags=tag_items)
