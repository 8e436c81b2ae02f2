"""Relational store utilities - engine and session."""

from src.projectree.core.db.engine import dispose_engine, get_engine
from src.projectree.core.db.session import get_session

__all__ = [
    "dispose_engine",
    "get_engine",
    "get_session",
]
