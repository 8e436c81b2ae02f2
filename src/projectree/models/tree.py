"""Project tree documents stored in the document store."""

from typing import Any

from pydantic import BaseModel, Field

ROOT_NODE_NAME = "root"


class TreeNode(BaseModel):
    name: str
    children: list["TreeNode"] = Field(default_factory=list)


class ProjectTree(BaseModel):
    """One document per project, keyed by the relational project id."""

    project_id: int
    root: TreeNode

    @classmethod
    def empty(cls, project_id: int) -> "ProjectTree":
        """Tree every new project starts with: a bare root node."""
        return cls(project_id=project_id, root=TreeNode(name=ROOT_NODE_NAME))

    def to_document(self) -> dict[str, Any]:
        return self.model_dump()
