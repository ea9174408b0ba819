"""Count posts use case."""

from pydantic import BaseModel

from blog.domain.service import PostService


class CountPostsResponse(BaseModel):
    """Count posts response."""

    count: int


class CountPostsUseCase:
    """Use case for counting stored posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self) -> CountPostsResponse:
        return CountPostsResponse(count=await self.post_service.count_posts())
