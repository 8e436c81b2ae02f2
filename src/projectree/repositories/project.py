"""Repository for Project records and their collaboration links."""

from sqlalchemy import ScalarSelect, String, delete, insert, literal, or_
from sqlmodel import select

from src.projectree.models import Collaborator, Project, User
from src.projectree.models.base import utc_now, utc_timestamp
from src.projectree.repositories.base import BaseRepository

# Core table for DML whose rowcount and RETURNING must come straight from the driver
projects = Project.__table__  # type: ignore[attr-defined]


def _user_id_of(username: str) -> ScalarSelect[int]:
    """Scalar subquery resolving a username to its user id (NULL if absent)."""
    return select(User.id).where(User.username == username).scalar_subquery()


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects, scoped by the acting username."""

    model = Project

    async def list_owned(self, username: str) -> list[Project]:
        """Projects whose owner is `username`."""
        result = await self.session.execute(
            select(Project).join(User, Project.owner_id == User.id).where(User.username == username)
        )
        return list(result.scalars().all())

    async def list_collaborated(self, username: str) -> list[Project]:
        """Projects where `username` appears in the collaborators relation."""
        result = await self.session.execute(
            select(Project)
            .join(Collaborator, Collaborator.project_id == Project.id)
            .where(Collaborator.user_id == _user_id_of(username))
        )
        return list(result.scalars().all())

    async def has_access(self, username: str, project_id: int) -> bool:
        """True if `username` owns or collaborates on the project."""
        user_id = _user_id_of(username)
        collaborates = (
            select(Collaborator.project_id)
            .where(Collaborator.project_id == Project.id, Collaborator.user_id == user_id)
            .exists()
        )
        result = await self.session.execute(
            select(Project.id).where(
                Project.id == project_id,
                or_(Project.owner_id == user_id, collaborates),
            )
        )
        return result.first() is not None

    async def create_owned(self, name: str, username: str) -> int | None:
        """Insert a project owned by `username` and return its generated id.

        Owner resolution and insert happen in one statement. Returns None when
        the username does not resolve to a user, in which case nothing is written.
        """
        owner = select(
            literal(name, String),
            User.id,
            literal(utc_now(), utc_timestamp()),
        ).where(User.username == username)
        stmt = (
            insert(projects)
            .from_select(["name", "owner_id", "created_at"], owner, include_defaults=False)
            .returning(projects.c.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_owned(self, project_id: int, username: str) -> int:
        """Delete the project only if `username` owns it. Returns rows affected.

        The ownership check is part of the DELETE predicate, so there is no
        window between checking and deleting.
        """
        result = await self.session.execute(
            delete(projects).where(
                projects.c.id == project_id,
                projects.c.owner_id == _user_id_of(username),
            )
        )
        return result.rowcount  # type: ignore[attr-defined,no-any-return]

    async def list_ids(self) -> set[int]:
        """All project ids, for cross-store reconciliation."""
        result = await self.session.execute(select(Project.id))
        return set(result.scalars().all())
