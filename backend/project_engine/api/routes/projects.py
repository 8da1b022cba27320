"""Project management routes."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from project_engine.api.deps import Store
from project_engine.models import FileSet, Project

logger = logging.getLogger(__name__)

router = APIRouter()


class CreateProjectRequest(BaseModel):
    """Request to create a new project."""

    title: str = Field(min_length=1)


class ProjectResponse(BaseModel):
    """Project information response."""

    id: str
    title: str
    created_at: str
    updated_at: str
    version_count: int
    latest_snapshot: str | None = None  # Thumbnail of the newest version


class ProjectListResponse(BaseModel):
    """List of projects response."""

    projects: list[ProjectResponse]
    total: int


class CurrentProjectResponse(BaseModel):
    """The open project and the files currently shown for it."""

    project: ProjectResponse | None = None
    selected_version_id: str | None = None
    files: FileSet
    has_unsaved_edits: bool = False


def to_project_response(project: Project) -> ProjectResponse:
    latest = project.latest_version
    return ProjectResponse(
        id=project.id,
        title=project.title,
        created_at=project.created_at.isoformat(),
        updated_at=project.updated_at.isoformat(),
        version_count=len(project.versions),
        latest_snapshot=latest.snapshot if latest else None,
    )


@router.get("", response_model=ProjectListResponse)
async def list_projects(store: Store) -> ProjectListResponse:
    """List all saved projects."""
    projects = [to_project_response(p) for p in store.projects]
    return ProjectListResponse(projects=projects, total=len(projects))


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(request: CreateProjectRequest, store: Store) -> ProjectResponse:
    """Start a new project and make it current.

    It is saved once its first version is generated.
    """
    project = store.create_project(request.title.strip())
    return to_project_response(project)


@router.get("/current", response_model=CurrentProjectResponse)
async def get_current_project(store: Store) -> CurrentProjectResponse:
    """Get the open project and its current files."""
    project = store.current_project
    version = store.selected_version
    return CurrentProjectResponse(
        project=to_project_response(project) if project else None,
        selected_version_id=version.id if version else None,
        files=store.current_files,
        has_unsaved_edits=store.has_unsaved_edits,
    )


@router.post("/reload", response_model=ProjectListResponse)
async def reload_projects(store: Store) -> ProjectListResponse:
    """Re-read saved projects from storage and discard unsaved file edits."""
    store.reload()
    projects = [to_project_response(p) for p in store.projects]
    return ProjectListResponse(projects=projects, total=len(projects))


@router.post("/{project_id}/open", response_model=ProjectResponse)
async def open_project(project_id: str, store: Store) -> ProjectResponse:
    """Open a saved project at its newest version."""
    project = store.open_project(project_id)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return to_project_response(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: str, store: Store) -> None:
    """Delete a project and its whole version history."""
    if not store.delete_project(project_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    logger.info(f"Project {project_id} deleted via API")
