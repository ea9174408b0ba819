"""Tag entity for labelling posts."""

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import TagId


class Tag(DomainModel):
    """Tag entity.

    Identity is the trimmed name: two tags never share a name. `count` is
    the number of posts currently labelled with the tag, computed on read.
    """

    id: TagId
    name: str = Field(min_length=1)
    count: int = Field(default=0, ge=0)
