"""Repository for project tree documents."""

from typing import Any

from src.projectree.core.documents import TreeCollection
from src.projectree.models import ProjectTree


class ProjectTreeRepository:
    """Document store access for project trees, keyed by project_id."""

    def __init__(self, collection: TreeCollection):
        self.collection = collection

    async def get(self, project_id: int) -> dict[str, Any] | None:
        """Return the stored document without the store's internal `_id`."""
        return await self.collection.find_one({"project_id": project_id}, {"_id": 0})

    async def insert_empty(self, project_id: int) -> bool:
        """Write the empty tree unless the project already has one.

        Upsert with $setOnInsert: an existing tree is left untouched, so
        concurrent writers (create and reconciliation) never collide on the
        unique index. Returns True if this call created the document.
        """
        tree = ProjectTree.empty(project_id).to_document()
        tree.pop("project_id")
        result = await self.collection.update_one(
            {"project_id": project_id},
            {"$setOnInsert": tree},
            upsert=True,
        )
        return result.upserted_id is not None

    async def delete(self, project_id: int) -> int:
        """Delete the tree for a project. Returns the number of documents removed."""
        result = await self.collection.delete_one({"project_id": project_id})
        return result.deleted_count

    async def list_project_ids(self) -> set[int]:
        """All project ids that have a tree document."""
        cursor = self.collection.find({}, {"_id": 0, "project_id": 1})
        return {doc["project_id"] async for doc in cursor if "project_id" in doc}
