"""Authentication dependencies."""

from typing import Annotated

from fastapi import Depends, Header

from src.projectree.core.exceptions import AuthenticationError
from src.projectree.core.logging import bind_subject_context, get_logger
from src.projectree.core.security import extract_subject

logger = get_logger(__name__)


async def get_current_subject(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Verify the bearer token and return the subject username.

    Runs before any store session is touched by the route.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Missing or invalid authorization header")

    subject = extract_subject(authorization[7:])
    if subject is None:
        logger.warning("Rejected bearer token")
        raise AuthenticationError("Invalid or expired token")

    bind_subject_context(subject)
    return subject


CurrentSubject = Annotated[str, Depends(get_current_subject)]
