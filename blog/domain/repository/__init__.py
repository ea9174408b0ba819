"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.post import PostRepository
from blog.domain.repository.tag import TagRepository

__all__ = [
    "PostRepository",
    "TagRepository",
]
