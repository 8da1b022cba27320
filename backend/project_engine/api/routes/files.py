"""Current file, preview and download routes."""

from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from project_engine.api.deps import Store
from project_engine.exceptions import NoActiveProjectError
from project_engine.models import FileSet
from project_engine.services.export import archive_filename, export_zip
from project_engine.services.preview import render_preview
from project_engine.services.project_store import ProjectStore

router = APIRouter()


class FilesResponse(BaseModel):
    """The working files of the open project."""

    files: FileSet


class EditFileRequest(BaseModel):
    """New content for one file of the working copy."""

    content: str


def _require_files(store: ProjectStore) -> FileSet:
    if store.current_project is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No project is open",
        )
    files = store.current_files
    if not files:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Nothing generated yet",
        )
    return files


@router.get("/files", response_model=FilesResponse)
async def get_files(store: Store) -> FilesResponse:
    """Get the current files (empty when nothing is open)."""
    return FilesResponse(files=store.current_files)


@router.put("/files/{name}", response_model=FilesResponse)
async def edit_file(name: str, request: EditFileRequest, store: Store) -> FilesResponse:
    """Overwrite or add one file of the open project.

    The edit is not saved as a version; it is sent as the existing code with
    the next prompt.
    """
    try:
        files = store.edit_file(name, request.content)
    except NoActiveProjectError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return FilesResponse(files=files)


@router.get("/preview", response_class=HTMLResponse)
async def preview(store: Store) -> HTMLResponse:
    """Render the current files as one HTML document for a sandboxed frame."""
    files = _require_files(store)
    return HTMLResponse(
        content=render_preview(files),
        headers={"Content-Security-Policy": "sandbox allow-scripts"},
    )


@router.get("/download")
async def download(store: Store) -> Response:
    """Download the current files as a ZIP archive named after the project."""
    files = _require_files(store)
    filename = archive_filename(store.current_project.title)
    return Response(
        content=export_zip(files),
        media_type="application/zip",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
