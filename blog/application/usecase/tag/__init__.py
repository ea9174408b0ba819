"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .get_tag import GetTagRequest, GetTagUseCase
from .get_tag_posts import GetTagPostsRequest, GetTagPostsResponse, GetTagPostsUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase, TagItem
from .rename_tag import RenameTagRequest, RenameTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "GetTagPostsRequest",
    "GetTagPostsResponse",
    "GetTagPostsUseCase",
    "GetTagRequest",
    "GetTagUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "RenameTagRequest",
    "RenameTagUseCase",
    "TagItem",
]
