"""Post aggregate and its read/write shapes."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId

EXCERPT_LENGTH = 150
EXCERPT_SUFFIX = "..."


class Post(DomainModel):
    """A blog post with its full content and current tag set."""

    id: PostId
    title: str
    content: str
    created_at: datetime
    tags: list[str] = Field(default_factory=list)


class PostSummary(DomainModel):
    """Reduced post representation used by listings and search."""

    id: PostId
    title: str
    excerpt: str
    created_at: datetime
    tags: list[str] = Field(default_factory=list)


class PostInput(DomainModel):
    """Data for creating a post.

    Blank tag names are dropped when the post is written; repeated names
    collapse into a single association.
    """

    title: str
    content: str
    tags: Optional[list[str]] = None


class PostUpdate(DomainModel):
    """Partial update of a post.

    Each field is either present (not None) and overwrites the stored value,
    or absent and preserves it. A present `tags` list, even an empty one,
    replaces the post's whole tag set.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None

    @property
    def changes_columns(self) -> bool:
        """Whether the update touches the post row itself."""
        return self.title is not None or self.content is not None


def make_excerpt(
    content: str, length: int = EXCERPT_LENGTH, suffix: str = EXCERPT_SUFFIX
) -> str:
    """Truncate content for summaries.

    Content of at most `length` characters is returned unchanged; longer
    content is cut to `length` characters and `suffix` is appended.
    """
    if len(content) > length:
        return content[:length] + suffix
    return content


def clean_tag_names(names: Optional[list[str]]) -> list[str]:
    """Trim tag names, dropping blanks and repeats while keeping input order."""
    cleaned: list[str] = []
    for name in names or []:
        trimmed = name.strip()
        if trimmed and trimmed not in cleaned:
            cleaned.append(trimmed)
    return cleaned
