"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from blog.application.usecase.post import (
    CountPostsResponse,
    CountPostsUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None


def _not_found(post_id: UUID) -> HTTPException:
    logfire.warn("Post not found", post_id=str(post_id))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    q: str | None = None,
    tag: str | None = None,
) -> ListPostsResponse:
    """List post summaries, newest first.

    Args:
        use_case: List posts use case (injected)
        q: Case-insensitive search in title and content
        tag: Only posts carrying this exact tag name; ignored when `q` is given

    Example:
        GET /api/posts?q=python
    """
    with logfire.span("api.list_posts", q=q, tag=tag):
        return await use_case.execute(ListPostsRequest(q=q, tag=tag))


@router.get("/count", response_model=CountPostsResponse)
async def count_posts(use_case: FromDishka[CountPostsUseCase]) -> CountPostsResponse:
    """Total number of posts."""
    return await use_case.execute()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, use_case: FromDishka[GetPostUseCase]) -> PostResponse:
    """Get a single post with full content."""
    result = await use_case.execute(GetPostRequest(post_id=str(post_id)))
    if result is None:
        raise _not_found(post_id)
    return result


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostRequest, use_case: FromDishka[CreatePostUseCase]
) -> PostResponse:
    """Create a new post.

    Empty title or content is answered with 400.
    """
    with logfire.span("api.create_post", title=request.title):
        return await use_case.execute(request)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    use_case: FromDishka[UpdatePostUseCase],
) -> PostResponse:
    """Update some or all fields of a post.

    Supplying `tags` (even an empty list) replaces the post's tag set.
    """
    with logfire.span("api.update_post", post_id=str(post_id)):
        result = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
        )
        if result is None:
            raise _not_found(post_id)
        return result


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID, use_case: FromDishka[DeletePostUseCase]
) -> DeletePostResponse:
    """Delete a post and detach its tags."""
    with logfire.span("api.delete_post", post_id=str(post_id)):
        result = await use_case.execute(DeletePostRequest(post_id=str(post_id)))
        if result is None:
            raise _not_found(post_id)
        return result
