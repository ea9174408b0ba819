"""Domain value objects for the blog."""

from blog.domain.value.identifiers import PostId, TagId

__all__ = [
    "PostId",
    "TagId",
]
