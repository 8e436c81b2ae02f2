"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    project_name: str = Field(alias="projectName", min_length=1, max_length=200)

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectCreated(BaseModel):
    """Identifier of a newly created project."""

    id: int


class OwnedProjectRead(BaseModel):
    """Entry of the owned-projects listing."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime = Field(serialization_alias="creationDate")


class CollaboratedProjectRead(BaseModel):
    """Entry of the collaborated-projects listing."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
