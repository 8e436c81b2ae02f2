"""Integration test fixtures for the stores and the HTTP client.

The relational store is a throwaway SQLite file per test (foreign keys on);
the document store is the in-memory FakeTreeCollection.
Uses polyfactory for test data generation.
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.projectree.api.dependencies import get_db_session, get_tree_collection_handle
from src.projectree.core.db import get_session
from src.projectree.main import create_app
from src.projectree.models import Collaborator, Project, ProjectTree, User
from tests.factories import CollaboratorFactory, ProjectFactory, UserFactory
from tests.utils import FakeTreeCollection


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Fresh SQLite database with all tables created."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'projects.db'}",
        poolclass=NullPool,
    )

    @event.listens_for(test_engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session for seeding and assertions. Tests must commit what they seed."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(
    engine: AsyncEngine, tree_collection: FakeTreeCollection
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app with both stores swapped for test ones."""
    app = create_app()

    async def _test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _test_session
    app.dependency_overrides[get_tree_collection_handle] = lambda: tree_collection

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def create_user(db_session: AsyncSession) -> Callable:
    async def _create(username: str | None = None) -> User:
        user = UserFactory.build(username=username) if username else UserFactory.build()
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _create


@pytest.fixture
def create_project(db_session: AsyncSession, tree_collection: FakeTreeCollection) -> Callable:
    """Seed a project in both stores (or only the relational one with with_tree=False)."""

    async def _create(owner: User, name: str | None = None, with_tree: bool = True) -> Project:
        kwargs = {"owner_id": owner.id}
        if name:
            kwargs["name"] = name
        project = ProjectFactory.build(**kwargs)
        db_session.add(project)
        await db_session.commit()
        await db_session.refresh(project)
        if with_tree:
            await tree_collection.insert_one(ProjectTree.empty(project.id).to_document())
        return project

    return _create


@pytest.fixture
def add_collaborator(db_session: AsyncSession) -> Callable:
    async def _add(project: Project, user: User) -> Collaborator:
        link = CollaboratorFactory.build(project_id=project.id, user_id=user.id)
        db_session.add(link)
        await db_session.commit()
        return link

    return _add
