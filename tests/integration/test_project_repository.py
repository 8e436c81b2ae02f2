"""Tests for ProjectRepository queries against a real SQL engine."""

import pytest

from src.projectree.models import Project, User
from src.projectree.models.base import utc_now
from src.projectree.repositories import ProjectRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(db_session) -> ProjectRepository:
    return ProjectRepository(db_session)


class TestHasAccess:
    async def test_owner_has_access(self, repo, create_user, create_project):
        alice = await create_user("alice")
        project = await create_project(alice)

        assert await repo.has_access("alice", project.id) is True

    async def test_collaborator_has_access(
        self, repo, create_user, create_project, add_collaborator
    ):
        alice = await create_user("alice")
        bob = await create_user("bob")
        project = await create_project(alice)
        await add_collaborator(project, bob)

        assert await repo.has_access("bob", project.id) is True

    async def test_collaboration_on_other_project_does_not_leak(
        self, repo, create_user, create_project, add_collaborator
    ):
        alice = await create_user("alice")
        bob = await create_user("bob")
        shared = await create_project(alice)
        private = await create_project(alice)
        await add_collaborator(shared, bob)

        assert await repo.has_access("bob", private.id) is False

    async def test_unknown_user_and_project(self, repo, create_user, create_project):
        alice = await create_user("alice")
        project = await create_project(alice)

        assert await repo.has_access("nobody", project.id) is False
        assert await repo.has_access("alice", project.id + 100) is False


class TestCreateOwned:
    async def test_returns_generated_id(self, repo, db_session, create_user):
        alice = await create_user("alice")

        project_id = await repo.create_owned("Alpha", "alice")
        await db_session.commit()

        project = await db_session.get(Project, project_id)
        assert project is not None
        assert project.owner_id == alice.id
        assert project.created_at is not None

    def test_timestamps_are_timezone_aware_columns(self):
        assert utc_now().tzinfo is not None
        assert Project.__table__.c.created_at.type.timezone is True  # type: ignore[attr-defined]
        assert User.__table__.c.created_at.type.timezone is True  # type: ignore[attr-defined]

    async def test_unknown_owner_inserts_nothing(self, repo, db_session):
        assert await repo.create_owned("Alpha", "ghost") is None
        await db_session.commit()

        assert await repo.list_ids() == set()


class TestDeleteOwned:
    async def test_owner_deletes(self, repo, db_session, create_user, create_project):
        alice = await create_user("alice")
        project = await create_project(alice)

        assert await repo.delete_owned(project.id, "alice") == 1
        await db_session.commit()

        assert await repo.exists(project.id) is False

    async def test_non_owner_deletes_nothing(self, repo, create_user, create_project):
        alice = await create_user("alice")
        await create_user("bob")
        project = await create_project(alice)

        assert await repo.delete_owned(project.id, "bob") == 0
        assert await repo.exists(project.id) is True

    async def test_absent_project(self, repo, create_user):
        await create_user("alice")

        assert await repo.delete_owned(12345, "alice") == 0


async def test_listings_are_scoped_to_subject(
    repo, create_user, create_project, add_collaborator
):
    alice = await create_user("alice")
    bob = await create_user("bob")
    owned = await create_project(alice)
    shared = await create_project(bob)
    await add_collaborator(shared, alice)

    assert [p.id for p in await repo.list_owned("alice")] == [owned.id]
    assert [p.id for p in await repo.list_collaborated("alice")] == [shared.id]
    assert await repo.list_owned("carol") == []
