"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ProjectFactory
"""

from tests.factories.base import BaseFactory
from tests.factories.project import CollaboratorFactory, ProjectFactory
from tests.factories.user import UserFactory

__all__ = [
    "BaseFactory",
    "CollaboratorFactory",
    "ProjectFactory",
    "UserFactory",
]
