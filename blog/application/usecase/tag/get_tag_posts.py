"""Get tag posts use case."""

from pydantic import BaseModel

from blog.domain.service import TagService


class GetTagPostsRequest(BaseModel):
    """Get tag posts request."""

    name: str


class GetTagPostsResponse(BaseModel):
    """IDs of the posts carrying a tag."""

    post_ids: list[str]


class GetTagPostsUseCase:
    """Use case for finding the posts labelled with a tag name."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: GetTagPostsRequest) -> GetTagPostsResponse:
        """Return post IDs for the tag; empty if the tag doesn't exist."""
        post_ids = await self.tag_service.get_post_ids(request.name)
        return GetTagPostsResponse(post_ids=sorted(str(p) for p in post_ids))
