"""Reconciliation command.

Usage:
    projectree-reconcile            # report skew only
    projectree-reconcile --repair   # create missing trees, delete orphaned ones
"""

import argparse
import asyncio
import sys

from src.projectree.core.config import get_settings
from src.projectree.core.db import dispose_engine, get_session
from src.projectree.core.documents import close_document_client, get_tree_collection
from src.projectree.core.logging import get_logger, setup_logging
from src.projectree.repositories import ProjectRepository, ProjectTreeRepository
from src.projectree.services import ReconciliationReport, ReconciliationService

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare project records with tree documents and report store skew"
    )
    parser.add_argument(
        "--repair",
        action="store_true",
        help="Create empty trees for projects without one and delete orphaned trees",
    )
    return parser.parse_args(argv)


async def run(repair: bool) -> ReconciliationReport:
    try:
        async with get_session() as session:
            service = ReconciliationService(
                ProjectRepository(session),
                ProjectTreeRepository(get_tree_collection()),
            )
            return await service.reconcile(repair=repair)
    finally:
        await close_document_client()
        await dispose_engine()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(get_settings().debug)

    report = asyncio.run(run(args.repair))

    print(f"missing trees:  {report.missing_trees or '-'}")
    print(f"orphaned trees: {report.orphaned_trees or '-'}")
    if args.repair:
        print(f"created {report.created_trees}, deleted {report.deleted_trees}")
        return 0
    return 0 if report.is_consistent else 1


if __name__ == "__main__":
    sys.exit(main())
