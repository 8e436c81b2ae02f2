"""Model exports.

Import from here: `from src.projectree.models import Project, User`
"""

from src.projectree.models.project import Collaborator, Project
from src.projectree.models.tree import ProjectTree, TreeNode
from src.projectree.models.user import User

__all__ = [
    # Relational
    "Collaborator",
    "Project",
    "User",
    # Document
    "ProjectTree",
    "TreeNode",
]
