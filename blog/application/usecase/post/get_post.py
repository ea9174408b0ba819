"""Get post use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.domain.model.post import Post
from blog.domain.service import PostService
from blog.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class PostResponse(BaseModel):
    """Full post representation."""

    id: str
    title: str
    content: str
    created_at: datetime
    tags: list[str]

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        """Build the response from a domain post."""
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            tags=list(post.tags),
        )


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Optional[PostResponse]:
        """Execute get post flow.

        Args:
            request: Get post request with post ID

        Returns:
            Post details if found, None otherwise
        """
        post = await self.post_service.get_post_by_id(PostId(UUID(request.post_id)))
        if not post:
            return None
        return PostResponse.from_post(post)
