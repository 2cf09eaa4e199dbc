"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from alembic import command
from alembic.config import Config
from httpx import ASGITransport, AsyncClient

PROJECT_DIR = Path(__file__).parent.parent


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> Generator[tuple[str, Path], None, None]:
    """Return the DSN of a throwaway SQLite database file."""
    db_path = tmp_path / "mapgraph_test.db"
    yield f"sqlite:///{db_path}", db_path


@pytest.fixture(scope="function")
def alembic_config() -> Config:
    return Config(str(PROJECT_DIR / "alembic.ini"))


@pytest.fixture(scope="function")
def alembic_migrate(
    test_database: tuple[str, Path], alembic_config: Config
) -> Generator[None, None, None]:
    """Run Alembic upgrade to head against the test database."""
    dsn, _ = test_database

    os.environ["MAPGRAPH_DATABASE_URL"] = dsn
    command.upgrade(alembic_config, "head")
    yield
    command.downgrade(alembic_config, "base")


@pytest_asyncio.fixture(scope="function")
async def reset_shared_db_connections(
    alembic_migrate: None, test_database: tuple[str, Path]
) -> AsyncGenerator[None, None]:
    """Point the shared connection pool at the migrated test database."""
    from mapgraph.database.connection import dispose_database, init_database, reset_database

    _ = alembic_migrate
    dsn, _ = test_database

    reset_database()
    init_database(dsn, force_reinit=True)

    yield

    await dispose_database()


@pytest_asyncio.fixture(scope="function")
async def db_session(reset_shared_db_connections: None) -> AsyncGenerator[Any, None]:
    """Provide an async SQLAlchemy session for testing."""
    _ = reset_shared_db_connections

    from mapgraph.database.connection import get_async_session

    async with get_async_session() as session:
        yield session


@pytest.fixture(scope="function")
def app(reset_shared_db_connections: None) -> Any:
    """A fresh application bound to the test database."""
    _ = reset_shared_db_connections

    from mapgraph.api.app import create_app

    return create_app()


@pytest_asyncio.fixture(scope="function")
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(scope="function")
def graphql(client: AsyncClient):
    """POST a GraphQL document and return the decoded response body."""

    async def execute(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
        return response.json()

    return execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(  # type: ignore[reportUnknownMemberType]
        "markers", "requires_db: mark test as requiring database connection"
    )
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
