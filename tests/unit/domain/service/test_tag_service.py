"""Unit tests for TagService."""

from uuid import uuid4

import pytest

from blog.domain.error import ValidationError
from blog.domain.model.post import PostInput
from blog.domain.service import PostService, TagService
from blog.domain.value import TagId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTagService:
    """Tests for TagService."""

    @pytest.mark.asyncio
    async def test_create_tag_is_idempotent(self, unit_env):
        """Creating the same name twice yields one tag."""
        # Arrange
        tag_service = await unit_env.get(TagService)

        # Act
        first = await tag_service.create_tag("ml")
        second = await tag_service.create_tag(" ml")

        # Assert
        assert first == second
        assert [t.name for t in await tag_service.get_all_tags()] == ["ml"]

    @pytest.mark.asyncio
    async def test_get_tag_missing_returns_none(self, unit_env):
        """Unknown IDs give None."""
        tag_service = await unit_env.get(TagService)

        assert await tag_service.get_tag(TagId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_rename_conflict_raises(self, unit_env):
        """A name held by another tag cannot be taken."""
        tag_service = await unit_env.get(TagService)
        tag_id = await tag_service.create_tag("one")
        await tag_service.create_tag("two")

        with pytest.raises(ValidationError):
            await tag_service.rename_tag(tag_id, "two")

    @pytest.mark.asyncio
    async def test_get_post_ids_and_delete(self, unit_env):
        """Post IDs follow the tag until it is deleted."""
        tag_service = await unit_env.get(TagService)
        post_service = await unit_env.get(PostService)
        post_id = await post_service.create_post(
            PostInput(title="T", content="C", tags=["topic"])
        )
        tag_id = await tag_service.create_tag("topic")

        assert await tag_service.get_post_ids("topic") == {post_id}

        assert await tag_service.delete_tag(tag_id) is True
        assert await tag_service.get_post_ids("topic") == set()
        assert await tag_service.delete_tag(tag_id) is False
