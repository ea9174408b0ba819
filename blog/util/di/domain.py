"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.domain.repository import PostRepository, TagRepository
from blog.domain.service import PostService, TagService
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the repositories they wrap are shared.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)
