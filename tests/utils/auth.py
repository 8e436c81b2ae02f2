"""Auth helpers for tests."""

from src.projectree.core.security import create_access_token


def auth_header(username: str) -> dict[str, str]:
    """Authorization header carrying a valid access token for `username`."""
    return {"Authorization": f"Bearer {create_access_token(username)}"}
