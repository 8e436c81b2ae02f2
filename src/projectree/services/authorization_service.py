"""Project access resolution."""

from src.projectree.core.logging import get_logger
from src.projectree.repositories import ProjectRepository

logger = get_logger(__name__)


class AuthorizationService:
    """Decides whether a subject may read a project.

    A subject has access when it owns the project or is listed as a
    collaborator. Lookup failures deny access; they never grant it.
    """

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def has_access(self, subject: str, project_id: int) -> bool:
        try:
            return await self.project_repo.has_access(subject, project_id)
        except Exception as e:
            logger.warning(
                "Access lookup failed, denying",
                project_id=project_id,
                error=str(e),
            )
            return False
