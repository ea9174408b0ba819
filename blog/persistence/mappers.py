"""Mappers for converting between database rows and domain models."""

from typing import Any, Dict, Sequence
from uuid import UUID

from blog.domain.model import Post, PostSummary, Tag
from blog.domain.model.post import EXCERPT_LENGTH, EXCERPT_SUFFIX, make_excerpt
from blog.domain.value import PostId, TagId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any], tag_names: Sequence[str] = ()) -> Post:
    """Convert a posts row plus its tag names to a Post.

    Args:
        row: Database row as dict
        tag_names: Names of the post's tags

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
        tags=list(tag_names),
    )


def row_to_summary(
    row: Dict[str, Any],
    tag_names: Sequence[str] = (),
    excerpt_length: int = EXCERPT_LENGTH,
    excerpt_suffix: str = EXCERPT_SUFFIX,
) -> PostSummary:
    """Convert a posts row plus its tag names to a PostSummary.

    Args:
        row: Database row as dict
        tag_names: Names of the post's tags
        excerpt_length: Characters of content kept in the excerpt
        excerpt_suffix: Marker appended to truncated content

    Returns:
        PostSummary domain model
    """
    return PostSummary(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        excerpt=make_excerpt(row["content"], excerpt_length, excerpt_suffix),
        created_at=row["created_at"],
        tags=list(tag_names),
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert a tags row (optionally with a `count` column) to a Tag."""
    return Tag(
        id=TagId(_as_uuid(row["id"])),
        name=row["name"],
        count=row.get("count") or 0,
    )
