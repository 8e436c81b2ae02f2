"""Service layer."""

from src.projectree.services.authorization_service import AuthorizationService
from src.projectree.services.project_service import ProjectService
from src.projectree.services.reconciliation_service import (
    ReconciliationReport,
    ReconciliationService,
)

__all__ = [
    "AuthorizationService",
    "ProjectService",
    "ReconciliationReport",
    "ReconciliationService",
]
