"""Cross-store reconciliation of project records and tree documents."""

from dataclasses import dataclass, field

from src.projectree.core.logging import get_logger
from src.projectree.repositories import ProjectRepository, ProjectTreeRepository

logger = get_logger(__name__)


@dataclass
class ReconciliationReport:
    missing_trees: list[int] = field(default_factory=list)
    orphaned_trees: list[int] = field(default_factory=list)
    created_trees: int = 0
    deleted_trees: int = 0

    @property
    def is_consistent(self) -> bool:
        return not self.missing_trees and not self.orphaned_trees


class ReconciliationService:
    """Finds and optionally repairs store skew.

    A project record without a tree gets an empty tree; a tree without a
    project record is deleted. Running it twice in a row is a no-op the
    second time.

    Safe to run next to live traffic. Trees are listed before project ids:
    a tree is only written after its record commits, so a tree seen in the
    first snapshot always has its record in the second. Empty trees are
    upserted, so an in-flight create and a repair never collide.
    """

    def __init__(self, project_repo: ProjectRepository, tree_repo: ProjectTreeRepository):
        self.project_repo = project_repo
        self.tree_repo = tree_repo

    async def reconcile(self, repair: bool = False) -> ReconciliationReport:
        tree_ids = await self.tree_repo.list_project_ids()
        project_ids = await self.project_repo.list_ids()

        report = ReconciliationReport(
            missing_trees=sorted(project_ids - tree_ids),
            orphaned_trees=sorted(tree_ids - project_ids),
        )
        logger.info(
            "Reconciliation scan complete",
            projects=len(project_ids),
            trees=len(tree_ids),
            missing_trees=len(report.missing_trees),
            orphaned_trees=len(report.orphaned_trees),
        )

        if not repair:
            return report

        for project_id in report.missing_trees:
            if await self.tree_repo.insert_empty(project_id):
                report.created_trees += 1
        for project_id in report.orphaned_trees:
            if await self.project_repo.exists(project_id):
                logger.info("Orphan candidate has a project record, kept", project_id=project_id)
                continue
            report.deleted_trees += await self.tree_repo.delete(project_id)

        logger.info(
            "Reconciliation repair complete",
            created_trees=report.created_trees,
            deleted_trees=report.deleted_trees,
        )
        return report
