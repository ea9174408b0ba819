"""List posts use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from blog.domain.model.post import PostSummary
from blog.domain.service import PostService


class PostListItem(BaseModel):
    """Post summary in a listing."""

    id: str
    title: str
    excerpt: str
    created_at: datetime
    tags: list[str]

    @classmethod
    def from_summary(cls, summary: PostSummary) -> "PostListItem":
        """Build the item from a domain summary."""
        return cls(
            id=str(summary.id),
            title=summary.title,
            excerpt=summary.excerpt,
            created_at=summary.created_at,
            tags=list(summary.tags),
        )


class ListPostsRequest(BaseModel):
    """List posts request."""

    q: str | None = None  # Search keyword (title or content)
    tag: str | None = None  # Filter by exact tag name


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]
    total: int


class ListPostsUseCase:
    """Use case for listing, searching and tag-filtering posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Optional keyword and tag filters

        Returns:
            Matching posts, newest first, and how many there are
        """
        with logfire.span("list_posts.execute", q=request.q, tag=request.tag):
            summaries = await self.post_service.list_posts(
                keyword=request.q, tag=request.tag
            )
            items = [PostListItem.from_summary(s) for s in summaries]

            logfire.info("Posts listed", count=len(items))
            return ListPostsResponse(posts=items, total=len(items))
