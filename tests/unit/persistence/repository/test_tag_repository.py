"""Tests for SqlTagRepository."""

import asyncio
from uuid import uuid4

import pytest

from blog.domain.error import ValidationError
from blog.domain.model.post import PostInput
from blog.domain.repository import PostRepository, TagRepository
from blog.domain.value import TagId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveOrCreate:
    """Tests for resolve_or_create."""

    @pytest.mark.asyncio
    async def test_creates_tag_with_zero_count(self, unit_env):
        """A new name becomes a tag nobody uses yet."""
        # Arrange
        tag_repo = await unit_env.get(TagRepository)

        # Act
        tag_id = await tag_repo.resolve_or_create("python")

        # Assert
        tag = await tag_repo.get_by_id(tag_id)
        assert tag is not None
        assert tag.name == "python"
        assert tag.count == 0

    @pytest.mark.asyncio
    async def test_same_trimmed_name_returns_same_id(self, unit_env):
        """Surrounding whitespace does not create a second tag."""
        tag_repo = await unit_env.get(TagRepository)

        first = await tag_repo.resolve_or_create("python")
        second = await tag_repo.resolve_or_create("  python  ")

        assert first == second
        assert len(await tag_repo.get_all()) == 1

    @pytest.mark.asyncio
    async def test_names_are_case_sensitive(self, unit_env):
        """Names differing only in case are different tags."""
        tag_repo = await unit_env.get(TagRepository)

        lower = await tag_repo.resolve_or_create("python")
        upper = await tag_repo.resolve_or_create("Python")

        assert lower != upper

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    async def test_blank_name_raises_validation_error(self, unit_env, name):
        """Blank names are rejected and nothing is stored."""
        tag_repo = await unit_env.get(TagRepository)

        with pytest.raises(ValidationError):
            await tag_repo.resolve_or_create(name)

        assert await tag_repo.get_all() == []

    @pytest.mark.asyncio
    async def test_parallel_calls_converge_on_one_tag(self, unit_env):
        """Racing callers with the same name all get the same ID."""
        tag_repo = await unit_env.get(TagRepository)

        tag_ids = await asyncio.gather(
            *(tag_repo.resolve_or_create(f" shared{' ' * i}") for i in range(8))
        )

        assert len(set(tag_ids)) == 1
        assert [t.name for t in await tag_repo.get_all()] == ["shared"]


class TestGetAll:
    """Tests for get_all ordering and counts."""

    @pytest.mark.asyncio
    async def test_orders_by_count_then_name(self, unit_env):
        """Most used tags come first; ties are broken by name."""
        # Arrange
        tag_repo = await unit_env.get(TagRepository)
        post_repo = await unit_env.get(PostRepository)

        await post_repo.create(PostInput(title="P1", content="C", tags=["a", "b"]))
        await post_repo.create(PostInput(title="P2", content="C", tags=["a"]))
        await tag_repo.resolve_or_create("c")

        # Act
        tags = await tag_repo.get_all()

        # Assert
        assert [(t.name, t.count) for t in tags] == [("a", 2), ("b", 1), ("c", 0)]

    @pytest.mark.asyncio
    async def test_ties_use_code_point_order(self, unit_env):
        """Uppercase names sort before lowercase ones at the same count."""
        tag_repo = await unit_env.get(TagRepository)
        for name in ["beta", "Zeta", "alpha"]:
            await tag_repo.resolve_or_create(name)

        tags = await tag_repo.get_all()

        assert [t.name for t in tags] == ["Zeta", "alpha", "beta"]

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, unit_env):
        """No tags yields an empty list."""
        tag_repo = await unit_env.get(TagRepository)

        assert await tag_repo.get_all() == []


class TestGetById:
    """Tests for get_by_id."""

    @pytest.mark.asyncio
    async def test_missing_tag_returns_none(self, unit_env):
        """Unknown IDs are not an error."""
        tag_repo = await unit_env.get(TagRepository)

        assert await tag_repo.get_by_id(TagId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_count_reflects_associations(self, unit_env):
        """Count is the number of posts using the tag."""
        tag_repo = await unit_env.get(TagRepository)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.create(PostInput(title="P1", content="C", tags=["x"]))
        await post_repo.create(PostInput(title="P2", content="C", tags=["x"]))

        tag_id = await tag_repo.resolve_or_create("x")
        tag = await tag_repo.get_by_id(tag_id)

        assert tag is not None
        assert tag.count == 2


class TestRename:
    """Tests for rename."""

    @pytest.mark.asyncio
    async def test_rename_updates_name_seen_by_posts(self, unit_env):
        """Posts show the new name after a rename."""
        # Arrange
        tag_repo = await unit_env.get(TagRepository)
        post_repo = await unit_env.get(PostRepository)
        post_id = await post_repo.create(
            PostInput(title="T", content="C", tags=["old"])
        )
        tag_id = await tag_repo.resolve_or_create("old")

        # Act
        renamed = await tag_repo.rename(tag_id, "  new  ")

        # Assert
        assert renamed is True
        post = await post_repo.get_by_id(post_id)
        assert post.tags == ["new"]
        assert (await tag_repo.get_by_id(tag_id)).name == "new"

    @pytest.mark.asyncio
    async def test_rename_missing_tag_returns_false(self, unit_env):
        """Renaming an unknown tag reports not found."""
        tag_repo = await unit_env.get(TagRepository)

        assert await tag_repo.rename(TagId(uuid4()), "anything") is False

    @pytest.mark.asyncio
    async def test_rename_to_blank_raises(self, unit_env):
        """Blank names are rejected before any write."""
        tag_repo = await unit_env.get(TagRepository)
        tag_id = await tag_repo.resolve_or_create("keep")

        with pytest.raises(ValidationError):
            await tag_repo.rename(tag_id, "   ")

        assert (await tag_repo.get_by_id(tag_id)).name == "keep"

    @pytest.mark.asyncio
    async def test_rename_without_id_raises(self, unit_env):
        """An empty tag ID is a validation error, not a miss."""
        tag_repo = await unit_env.get(TagRepository)

        with pytest.raises(ValidationError):
            await tag_repo.rename(None, "name")

    @pytest.mark.asyncio
    async def test_rename_to_other_tags_name_raises(self, unit_env):
        """Names stay unique: taking another tag's name is refused."""
        tag_repo = await unit_env.get(TagRepository)
        first = await tag_repo.resolve_or_create("first")
        await tag_repo.resolve_or_create("second")

        with pytest.raises(ValidationError):
            await tag_repo.rename(first, "second")

        assert sorted(t.name for t in await tag_repo.get_all()) == [
            "first",
            "second",
        ]

    @pytest.mark.asyncio
    async def test_rename_to_own_name_succeeds(self, unit_env):
        """Renaming a tag to its current name is a no-op success."""
        tag_repo = await unit_env.get(TagRepository)
        tag_id = await tag_repo.resolve_or_create("same")

        assert await tag_repo.rename(tag_id, " same ") is True


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_tag_from_posts(self, unit_env):
        """Deleting a tag detaches it everywhere but keeps the posts."""
        # Arrange
        tag_repo = await unit_env.get(TagRepository)
        post_repo = await unit_env.get(PostRepository)
        post_id = await post_repo.create(
            PostInput(title="T", content="C", tags=["doomed", "kept"])
        )
        tag_id = await tag_repo.resolve_or_create("doomed")

        # Act
        deleted = await tag_repo.delete(tag_id)

        # Assert
        assert deleted is True
        assert await tag_repo.get_by_id(tag_id) is None
        assert (await post_repo.get_by_id(post_id)).tags == ["kept"]
        assert await tag_repo.posts_by_tag_name("doomed") == set()
        assert await post_repo.count() == 1

    @pytest.mark.asyncio
    async def test_delete_missing_tag_returns_false(self, unit_env):
        """Deleting an unknown tag reports not found."""
        tag_repo = await unit_env.get(TagRepository)

        assert await tag_repo.delete(TagId(uuid4())) is False


class TestPostsByTagName:
    """Tests for posts_by_tag_name."""

    @pytest.mark.asyncio
    async def test_returns_ids_of_tagged_posts(self, unit_env):
        """Only posts carrying the tag are returned."""
        tag_repo = await unit_env.get(TagRepository)
        post_repo = await unit_env.get(PostRepository)
        tagged = await post_repo.create(
            PostInput(title="A", content="C", tags=["news"])
        )
        await post_repo.create(PostInput(title="B", content="C", tags=["other"]))

        assert await tag_repo.posts_by_tag_name(" news ") == {tagged}

    @pytest.mark.asyncio
    async def test_unknown_name_returns_empty_set(self, unit_env):
        """Reading never creates a tag."""
        tag_repo = await unit_env.get(TagRepository)

        assert await tag_repo.posts_by_tag_name("ghost") == set()
        assert await tag_repo.get_all() == []
