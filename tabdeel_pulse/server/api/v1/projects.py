"""
Project Endpoints.

Projects are listed by name; create and replace both require a name and a status.
"""

from fastapi import APIRouter, HTTPException, status

from tabdeel_pulse.core.database.entities import Project
from tabdeel_pulse.core.database.repositories import ProjectRepository
from tabdeel_pulse.core.models.io import ProjectRead, ProjectWrite
from tabdeel_pulse.server.services.deps import SessionDep, require_fields

router = APIRouter()


@router.get("", response_model=list[ProjectRead], summary="List Projects", description="All projects ordered by name.")
async def list_projects(session: SessionDep) -> list[ProjectRead]:
    return [ProjectRead.model_validate(p) for p in await ProjectRepository(session).list()]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Project",
    responses={400: {"description": "Missing required fields: name, status"}},
)
async def create_project(project_in: ProjectWrite, session: SessionDep) -> ProjectRead:
    require_fields(name=project_in.name, status=project_in.status)
    project = await ProjectRepository(session).create(
        Project(name=project_in.name.strip(), status=project_in.status.value)  # type: ignore[union-attr]
    )
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update Project",
    responses={
        400: {"description": "Missing required fields: name, status"},
        404: {"description": "Project not found"},
    },
)
async def update_project(project_id: int, project_in: ProjectWrite, session: SessionDep) -> ProjectRead:
    require_fields(name=project_in.name, status=project_in.status)
    repo = ProjectRepository(session)
    project = await repo.get_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Project {project_id} not found")
    project = await repo.apply_changes(
        project,
        {"name": project_in.name.strip(), "status": project_in.status.value},  # type: ignore[union-attr]
    )
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Project",
    responses={404: {"description": "Project not found"}},
)
async def delete_project(project_id: int, session: SessionDep) -> None:
    if not await ProjectRepository(session).delete(project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Project {project_id} not found")
