"""Update post use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.domain.model.post import PostUpdate
from blog.domain.service import PostService
from blog.domain.value import PostId

from .get_post import PostResponse


class UpdatePostRequest(BaseModel):
    """Update post request.

    Omitted (or null) fields keep their stored values.
    """

    post_id: str  # UUID string
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None


class UpdatePostUseCase:
    """Use case for partially updating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> Optional[PostResponse]:
        """Execute update post flow.

        Args:
            request: Post ID plus the fields to change

        Returns:
            Updated post details, or None if the post doesn't exist

        Raises:
            ValidationError: If a supplied title or content is empty
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("update_post.execute", post_id=request.post_id):
            updated = await self.post_service.update_post(
                post_id,
                PostUpdate(
                    title=request.title,
                    content=request.content,
                    tags=request.tags,
                ),
            )
            if not updated:
                return None

            post = await self.post_service.get_post_by_id(post_id)
            return PostResponse.from_post(post) if post else None
