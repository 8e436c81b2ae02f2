"""Test utilities."""

from tests.utils.auth import auth_header
from tests.utils.documents import FakeTreeCollection

__all__ = ["FakeTreeCollection", "auth_header"]
