"""Tag routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from blog.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    GetTagPostsRequest,
    GetTagPostsResponse,
    GetTagPostsUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
    RenameTagRequest,
    RenameTagUseCase,
    TagItem,
)

router = APIRouter(
    prefix="/api/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


class TagNameAPIRequest(BaseModel):
    """API request carrying a tag name."""

    name: str


def _not_found(tag_id: UUID) -> HTTPException:
    logfire.warn("Tag not found", tag_id=str(tag_id))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
    description="Every tag with the number of posts using it, most used first.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags with usage counts."""
    with logfire.span("api.list_tags"):
        return await use_case.execute()


@router.get("/{tag_id}", response_model=TagItem)
async def get_tag(tag_id: UUID, use_case: FromDishka[GetTagUseCase]) -> TagItem:
    """Get a single tag."""
    result = await use_case.execute(GetTagRequest(tag_id=str(tag_id)))
    if result is None:
        raise _not_found(tag_id)
    return result


@router.post("", response_model=TagItem, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: TagNameAPIRequest, use_case: FromDishka[CreateTagUseCase]
) -> TagItem:
    """Create a tag; an existing tag with the same trimmed name is returned."""
    with logfire.span("api.create_tag", tag_name=request.name):
        return await use_case.execute(CreateTagRequest(name=request.name))


@router.put("/{tag_id}", response_model=TagItem)
async def rename_tag(
    tag_id: UUID,
    request: TagNameAPIRequest,
    use_case: FromDishka[RenameTagUseCase],
) -> TagItem:
    """Rename a tag. Names held by another tag are answered with 400."""
    with logfire.span("api.rename_tag", tag_id=str(tag_id), tag_name=request.name):
        result = await use_case.execute(
            RenameTagRequest(tag_id=str(tag_id), name=request.name)
        )
        if result is None:
            raise _not_found(tag_id)
        return result


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: UUID, use_case: FromDishka[DeleteTagUseCase]) -> Response:
    """Delete a tag and remove it from every post."""
    with logfire.span("api.delete_tag", tag_id=str(tag_id)):
        if not await use_case.execute(DeleteTagRequest(tag_id=str(tag_id))):
            raise _not_found(tag_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{name}/posts", response_model=GetTagPostsResponse)
async def get_tag_posts(
    name: str, use_case: FromDishka[GetTagPostsUseCase]
) -> GetTagPostsResponse:
    """IDs of the posts labelled with the tag name."""
    return await use_case.execute(GetTagPostsRequest(name=name))
