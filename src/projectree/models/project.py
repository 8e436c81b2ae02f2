"""Relational project records - the authoritative side of a project."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.projectree.models.base import utc_now, utc_timestamp


class Project(SQLModel, table=True):
    """Canonical project record.

    Ownership is fixed at creation. The matching tree document lives in the
    document store under the same id.
    """

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    owner_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=utc_timestamp())


class Collaborator(SQLModel, table=True):
    """Junction table granting a user read access to a project they don't own."""

    __tablename__ = "collaborators"

    project_id: int = Field(foreign_key="projects.id", primary_key=True, ondelete="CASCADE")
    user_id: int = Field(foreign_key="users.id", primary_key=True, index=True)
