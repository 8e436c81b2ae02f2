"""Store handle dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.projectree.core.db import get_session
from src.projectree.core.documents import TreeCollection, get_tree_collection


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """Relational session for the duration of one request."""
    async with get_session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_tree_collection_handle() -> TreeCollection:
    """Document collection holding project trees."""
    return get_tree_collection()


TreeCollectionHandle = Annotated[TreeCollection, Depends(get_tree_collection_handle)]
