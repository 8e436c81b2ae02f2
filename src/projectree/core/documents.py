"""Document store client for project trees.

The client is created lazily on first use and reused for the life of the
process. Call close_document_client() during application shutdown.
"""

from typing import Any

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from src.projectree.core.config import get_settings
from src.projectree.core.logging import get_logger

logger = get_logger(__name__)

TreeCollection = AsyncCollection[dict[str, Any]]

_client: AsyncMongoClient[dict[str, Any]] | None = None


def get_document_client() -> AsyncMongoClient[dict[str, Any]]:
    """Get or create the document store client singleton."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = AsyncMongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            socketTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )
    return _client


def get_tree_collection() -> TreeCollection:
    """Get the collection holding one tree document per project."""
    settings = get_settings()
    database = get_document_client()[settings.mongo_database]
    return database[settings.mongo_tree_collection]


async def ensure_tree_indexes(collection: TreeCollection | None = None) -> None:
    """Create the unique project_id index. Safe to call repeatedly."""
    if collection is None:
        collection = get_tree_collection()
    await collection.create_index([("project_id", ASCENDING)], unique=True)
    logger.info("Tree collection indexes ensured", collection=collection.name)


async def ping_document_store() -> None:
    """Round-trip to the document store. Raises on failure."""
    await get_document_client().admin.command("ping")


async def close_document_client() -> None:
    """Close the document store client. Call during shutdown."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("Document store connection closed")
