"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from blog.domain.error import ValidationError
from blog.domain.model.post import PostInput, PostUpdate
from blog.domain.service import PostService
from blog.domain.value import PostId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_is_readable(self, unit_env):
        """A created post can be read back by its ID."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act
        post_id = await post_service.create_post(
            PostInput(title="Title", content="Body", tags=["t"])
        )

        # Assert
        post = await post_service.get_post_by_id(post_id)
        assert post is not None
        assert post.title == "Title"
        assert post.tags == ["t"]

    @pytest.mark.asyncio
    async def test_create_post_requires_title(self, unit_env):
        """Empty title raises ValidationError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(PostInput(title="", content="Body"))


class TestListPosts:
    """Tests for list_posts dispatch."""

    @pytest.mark.asyncio
    async def test_no_filters_lists_everything(self, unit_env):
        """Without filters all posts are listed."""
        post_service = await unit_env.get(PostService)
        await post_service.create_post(PostInput(title="A", content="C"))
        await post_service.create_post(PostInput(title="B", content="C"))

        posts = await post_service.list_posts()

        assert [p.title for p in posts] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_keyword_searches(self, unit_env):
        """A keyword narrows the list to matching posts."""
        post_service = await unit_env.get(PostService)
        await post_service.create_post(PostInput(title="Django tips", content="C"))
        await post_service.create_post(PostInput(title="Flask", content="C"))

        posts = await post_service.list_posts(keyword="django")

        assert [p.title for p in posts] == ["Django tips"]

    @pytest.mark.asyncio
    async def test_tag_filters(self, unit_env):
        """A tag narrows the list to that tag's posts."""
        post_service = await unit_env.get(PostService)
        await post_service.create_post(
            PostInput(title="Tagged", content="C", tags=["web"])
        )
        await post_service.create_post(PostInput(title="Untagged", content="C"))

        posts = await post_service.list_posts(tag="web")

        assert [p.title for p in posts] == ["Tagged"]

    @pytest.mark.asyncio
    async def test_keyword_wins_over_tag(self, unit_env):
        """When both filters are given the tag is ignored."""
        post_service = await unit_env.get(PostService)
        await post_service.create_post(
            PostInput(title="Tagged", content="C", tags=["web"])
        )
        await post_service.create_post(PostInput(title="Keyword", content="C"))

        posts = await post_service.list_posts(keyword="keyword", tag="web")

        assert [p.title for p in posts] == ["Keyword"]


class TestUpdateAndDelete:
    """Tests for update_post, delete_post and count_posts."""

    @pytest.mark.asyncio
    async def test_update_missing_post_returns_false(self, unit_env):
        """Unknown posts are reported, not raised."""
        post_service = await unit_env.get(PostService)

        assert (
            await post_service.update_post(PostId(uuid4()), PostUpdate(title="T"))
            is False
        )

    @pytest.mark.asyncio
    async def test_delete_post_updates_count(self, unit_env):
        """Deleting a post lowers the count."""
        post_service = await unit_env.get(PostService)
        post_id = await post_service.create_post(PostInput(title="T", content="C"))
        assert await post_service.count_posts() == 1

        assert await post_service.delete_post(post_id) is True
        assert await post_service.count_posts() == 0
        assert await post_service.delete_post(post_id) is False
