"""Test harness for repository, service, use case and API tests.

Mocked persistence is a throwaway SQLite database file, created per fixture
instance. Settings are loaded from environment variables (configure via .env
or export).
"""

import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from blog.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container, and with it the database, afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Everything mocked, fresh database per test
        unit_env = create_env_fixture()

        # Real persistence, database taken from DATABASE__URL
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            repo = await unit_env.get(PostRepository)
            post_id = await repo.create(PostInput(title="T", content="C"))
            assert await repo.get_by_id(post_id) is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding an HTTP client bound to the app.

    Requests go straight to the ASGI app through httpx; no server is started.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields httpx.AsyncClient
    """

    @pytest_asyncio.fixture
    async def _client():
        # Imported here so the module-level app is built after conftest ran
        from blog.interface.api.app import create_app

        container = build_test_container(
            unmock=unmock or set(), extra_providers=[FastapiProvider()]
        )
        app = create_app(container=container)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            yield client

        await container.close()

    return _client
