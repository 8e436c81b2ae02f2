"""FastAPI dependency injection definitions."""

from src.projectree.api.dependencies.auth import CurrentSubject, get_current_subject
from src.projectree.api.dependencies.db import (
    DBSession,
    TreeCollectionHandle,
    get_db_session,
    get_tree_collection_handle,
)
from src.projectree.api.dependencies.services import ProjectServiceDep, get_project_service

__all__ = [
    # Auth
    "CurrentSubject",
    "get_current_subject",
    # Stores
    "DBSession",
    "TreeCollectionHandle",
    "get_db_session",
    "get_tree_collection_handle",
    # Services
    "ProjectServiceDep",
    "get_project_service",
]
