"""Security utilities - token verification.

Re-exports token functions for convenience.
"""

from src.projectree.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_token,
    extract_subject,
)

__all__ = [
    "ACCESS_TOKEN_TYPE",
    "create_access_token",
    "decode_token",
    "extract_subject",
]
