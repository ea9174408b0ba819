"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool
    message: str


class DeletePostUseCase:
    """Use case for deleting a post and its tag associations."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse | None:
        """Delete the post.

        Returns:
            Confirmation, or None if the post doesn't exist
        """
        deleted = await self.post_service.delete_post(PostId(UUID(request.post_id)))
        if not deleted:
            return None
        return DeletePostResponse(success=True, message="Post deleted successfully")
