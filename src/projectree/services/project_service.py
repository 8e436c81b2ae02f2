"""Project lifecycle across the relational store and the document store.

The relational record is authoritative for a project's existence; the tree
document is written after it (create) or removed after it (delete). The two
writes are not transactional: if the second one fails the stores disagree
until reconciliation runs, and the divergence is logged where it happens.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from pymongo.errors import PyMongoError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.projectree.core.exceptions import (
    AuthorizationError,
    ConsistencyError,
    ProjectNotFoundError,
    ProjectValidationError,
    StoreError,
)
from src.projectree.core.logging import get_logger
from src.projectree.models import Project
from src.projectree.repositories import ProjectRepository, ProjectTreeRepository
from src.projectree.services.authorization_service import AuthorizationService

logger = get_logger(__name__)


class ProjectService:
    """Project operations for an authenticated subject."""

    def __init__(
        self,
        session: AsyncSession,
        project_repo: ProjectRepository,
        tree_repo: ProjectTreeRepository,
        authorization: AuthorizationService,
    ):
        self.session = session
        self.project_repo = project_repo
        self.tree_repo = tree_repo
        self.authorization = authorization

    @asynccontextmanager
    async def _store_errors(self, action: str) -> AsyncGenerator[None]:
        """Translate driver failures into StoreError, rolling back relational work."""
        try:
            yield
        except (SQLAlchemyError, PyMongoError) as e:
            if self.session.in_transaction():
                await self.session.rollback()
            logger.error(f"{action} error", error=str(e))
            raise StoreError(f"{action} error: {e}") from e

    async def list_owned(self, subject: str) -> list[Project]:
        async with self._store_errors("Project fetching"):
            return await self.project_repo.list_owned(subject)

    async def list_collaborated(self, subject: str) -> list[Project]:
        async with self._store_errors("Project fetching"):
            return await self.project_repo.list_collaborated(subject)

    async def get_tree(self, subject: str, project_id: int) -> dict[str, Any]:
        """Return the project's tree document verbatim.

        Raises:
            ProjectNotFoundError: no project with this id exists.
            AuthorizationError: the project exists but the subject has no access.
            ConsistencyError: access was granted but the tree document is missing.
        """
        if not await self.authorization.has_access(subject, project_id):
            async with self._store_errors(f"Project with id {project_id}, fetching"):
                exists = await self.project_repo.exists(project_id)
            if not exists:
                raise ProjectNotFoundError(f"Project {project_id} not found")
            logger.info("Project access denied", project_id=project_id)
            raise AuthorizationError()

        async with self._store_errors(f"Project with id {project_id}, fetching"):
            document = await self.tree_repo.get(project_id)

        if document is None:
            logger.error("Project has no tree document", project_id=project_id, stage="fetch")
            raise ConsistencyError("Project is empty")
        return document

    async def create(self, subject: str, name: str | None) -> int:
        """Create the relational record, then its empty tree. Returns the new id."""
        name = name.strip() if name else ""
        if not name:
            raise ProjectValidationError("Project name not found")

        async with self._store_errors("Project creation"):
            project_id = await self.project_repo.create_owned(name, subject)
            if project_id is None:
                await self.session.rollback()
                logger.error("Verified subject has no user record")
                raise ConsistencyError("Project creation error")
            await self.session.commit()

        try:
            async with self._store_errors("Project structure creation"):
                created = await self.tree_repo.insert_empty(project_id)
        except StoreError:
            logger.error(
                "Project record committed without tree document",
                project_id=project_id,
                stage="create",
            )
            raise

        if not created:
            logger.info("Project tree was already written", project_id=project_id)
        logger.info("Project created", project_id=project_id)
        return project_id

    async def delete(self, subject: str, project_id: int) -> None:
        """Delete a project owned by the subject, then its tree.

        Absent and not-owned projects both raise ProjectNotFoundError.
        """
        async with self._store_errors("Project deletion"):
            rows = await self.project_repo.delete_owned(project_id, subject)
            if rows == 0:
                raise ProjectNotFoundError("Project not found")
            await self.session.commit()

        try:
            async with self._store_errors("Project structure deletion"):
                deleted = await self.tree_repo.delete(project_id)
        except StoreError:
            logger.error(
                "Project record deleted but tree document remains",
                project_id=project_id,
                stage="delete",
            )
            raise

        if deleted == 0:
            logger.warning("Deleted project had no tree document", project_id=project_id)
        logger.info("Project deleted", project_id=project_id, deleted_trees=deleted)
