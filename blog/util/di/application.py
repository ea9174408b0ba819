"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.post import (
    CountPostsUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagPostsUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    RenameTagUseCase,
)
from blog.domain.service import PostService, TagService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_count_posts_use_case(self, post_service: PostService) -> CountPostsUseCase:
        """Provide count posts use case."""
        return CountPostsUseCase(post_service=post_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide
    def get_rename_tag_use_case(self, tag_service: TagService) -> RenameTagUseCase:
        """Provide rename tag use case."""
        return RenameTagUseCase(tag_service=tag_service)

    @provide
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)

    @provide
    def get_get_tag_posts_use_case(
        self, tag_service: TagService
    ) -> GetTagPostsUseCase:
        """Provide get tag posts use case."""
        return GetTagPostsUseCase(tag_service=tag_service)
