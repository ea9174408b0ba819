"""SQL repository implementations."""

from blog.persistence.repository.post import SqlPostRepository
from blog.persistence.repository.tag import SqlTagRepository

__all__ = [
    "SqlPostRepository",
    "SqlTagRepository",
]
