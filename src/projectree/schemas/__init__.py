"""API schemas."""

from src.projectree.schemas.project import (
    CollaboratedProjectRead,
    OwnedProjectRead,
    ProjectCreate,
    ProjectCreated,
)

__all__ = [
    "CollaboratedProjectRead",
    "OwnedProjectRead",
    "ProjectCreate",
    "ProjectCreated",
]
