"""Domain model entities for the blog."""

from blog.domain.model.post import Post, PostInput, PostSummary, PostUpdate
from blog.domain.model.tag import Tag

__all__ = [
    "Post",
    "PostInput",
    "PostSummary",
    "PostUpdate",
    "Tag",
]
