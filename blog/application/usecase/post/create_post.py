"""Create post use case."""

import logfire
from pydantic import BaseModel

from blog.domain.model.post import PostInput
from blog.domain.service import PostService

from .get_post import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    tags: list[str] | None = None


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Create the post with its tags (one transaction)
        2. Read it back so the response carries stored values

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If title or content is empty
        """
        with logfire.span("create_post.execute", title=request.title, tags=request.tags):
            post_id = await self.post_service.create_post(
                PostInput(
                    title=request.title,
                    content=request.content,
                    tags=request.tags,
                )
            )

            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                # Deleted by a concurrent request between the two calls
                raise LookupError(f"Post vanished after creation: {post_id}")

            logfire.info("Post created successfully", post_id=str(post_id))
            return PostResponse.from_post(post)
