"""Version history routes."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from project_engine.api.deps import Store
from project_engine.models import FileSet, Version

router = APIRouter()


class VersionSummary(BaseModel):
    """Summary of a version (without file contents)."""

    id: str
    prompt: str
    timestamp: str
    file_names: list[str]
    snapshot: str | None = None


class VersionResponse(BaseModel):
    """Full version with file contents."""

    id: str
    prompt: str
    timestamp: str
    files: FileSet
    snapshot: str | None = None


class VersionListResponse(BaseModel):
    """Versions of a project, newest first."""

    versions: list[VersionSummary]
    total: int


def to_version_response(version: Version) -> VersionResponse:
    return VersionResponse(
        id=version.id,
        prompt=version.prompt,
        timestamp=version.timestamp.isoformat(),
        files=dict(version.files),
        snapshot=version.snapshot,
    )


@router.get("/projects/{project_id}/versions", response_model=VersionListResponse)
async def list_versions(project_id: str, store: Store) -> VersionListResponse:
    """List all versions of a project, newest first."""
    project = store.get_project(project_id)
    if project is None and store.current_project and store.current_project.id == project_id:
        # Current project that has not been saved yet
        project = store.current_project
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )

    return VersionListResponse(
        versions=[
            VersionSummary(
                id=v.id,
                prompt=v.prompt,
                timestamp=v.timestamp.isoformat(),
                file_names=list(v.files),
                snapshot=v.snapshot,
            )
            for v in project.versions
        ],
        total=len(project.versions),
    )


@router.post("/versions/{version_id}/load", response_model=VersionResponse)
async def load_version(version_id: str, store: Store) -> VersionResponse:
    """Show an earlier version of the open project."""
    if store.current_project is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No project is open",
        )

    version = store.load_version(version_id)
    if not version:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Version {version_id} not found",
        )
    return to_version_response(version)
