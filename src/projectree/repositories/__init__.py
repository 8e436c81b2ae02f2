"""Repository layer - data access for both stores."""

from src.projectree.repositories.base import BaseRepository
from src.projectree.repositories.project import ProjectRepository
from src.projectree.repositories.tree import ProjectTreeRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "ProjectTreeRepository",
]
