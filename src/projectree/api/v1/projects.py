"""Project endpoints.

Routes are declared literal-first: `/projects/collaborators` must be
registered before `/projects/{project_id}` so it is never parsed as an id.
"""

from typing import Annotated, Any

from bson import json_util
from fastapi import APIRouter, Path, Response, status

from src.projectree.api.dependencies import CurrentSubject, ProjectServiceDep
from src.projectree.schemas import (
    CollaboratedProjectRead,
    OwnedProjectRead,
    ProjectCreate,
    ProjectCreated,
)

router = APIRouter(prefix="/projects", tags=["projects"])

ProjectId = Annotated[int, Path(ge=1, description="Numeric project id")]


@router.get(
    "",
    response_model=list[OwnedProjectRead],
    summary="List owned projects",
    responses={
        200: {"description": "Projects owned by the caller (possibly empty)"},
        401: {"description": "Missing or invalid token"},
    },
)
async def list_owned_projects(
    subject: CurrentSubject,
    service: ProjectServiceDep,
) -> list[OwnedProjectRead]:
    projects = await service.list_owned(subject)
    return [OwnedProjectRead.model_validate(p) for p in projects]


@router.get(
    "/collaborators",
    response_model=list[CollaboratedProjectRead],
    summary="List collaborated projects",
    responses={
        200: {"description": "Projects the caller collaborates on (possibly empty)"},
        401: {"description": "Missing or invalid token"},
    },
)
async def list_collaborated_projects(
    subject: CurrentSubject,
    service: ProjectServiceDep,
) -> list[CollaboratedProjectRead]:
    projects = await service.list_collaborated(subject)
    return [CollaboratedProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    summary="Get project tree",
    description="Return the project's tree document. Owner or collaborator only.",
    responses={
        200: {"description": "Tree document"},
        401: {"description": "Missing token, or caller has no access to the project"},
        404: {"description": "Project not found"},
        500: {"description": "Store failure or missing tree document"},
    },
)
async def get_project(
    subject: CurrentSubject,
    project_id: ProjectId,
    service: ProjectServiceDep,
) -> Response:
    document: dict[str, Any] = await service.get_tree(subject, project_id)
    # Extended JSON so BSON-only values (ObjectId, dates) still render
    return Response(
        content=json_util.dumps(document, json_options=json_util.RELAXED_JSON_OPTIONS),
        media_type="application/json",
    )


@router.post(
    "",
    response_model=ProjectCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created with an empty tree"},
        401: {"description": "Missing or invalid token"},
        422: {"description": "projectName missing or empty"},
    },
)
async def create_project(
    subject: CurrentSubject,
    request: ProjectCreate,
    service: ProjectServiceDep,
) -> ProjectCreated:
    project_id = await service.create(subject, request.project_name)
    return ProjectCreated(id=project_id)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project and its tree. Owner only.",
    responses={
        204: {"description": "Project deleted"},
        401: {"description": "Missing or invalid token"},
        404: {"description": "Project not found or not owned by caller"},
    },
)
async def delete_project(
    subject: CurrentSubject,
    project_id: ProjectId,
    service: ProjectServiceDep,
) -> None:
    await service.delete(subject, project_id)
