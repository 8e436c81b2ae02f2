"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.projectree.api.dependencies.db import DBSession, TreeCollectionHandle
from src.projectree.repositories import ProjectRepository, ProjectTreeRepository
from src.projectree.services import AuthorizationService, ProjectService


def get_project_service(session: DBSession, collection: TreeCollectionHandle) -> ProjectService:
    """Get project service wired to this request's store handles."""
    project_repo = ProjectRepository(session)
    return ProjectService(
        session,
        project_repo,
        ProjectTreeRepository(collection),
        AuthorizationService(project_repo),
    )


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
