import io
import re
import zipfile

from project_engine.models import FileSet

ARCHIVE_TITLE_LENGTH = 20


def archive_filename(title: str) -> str:
    """Derive the download name from a project title, e.g. 'My cool site' -> 'My-cool-site.zip'."""
    name = re.sub(r"\s+", "-", title[:ARCHIVE_TITLE_LENGTH])
    return f"{name}.zip"


def export_zip(files: FileSet) -> bytes:
    """
    Package a file set into an in-memory ZIP archive.

    Args:
        files (FileSet): Mapping of filename to content; each file is written under its own name.

    Returns:
        bytes: The archive content.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zip_file:
        for name, content in files.items():
            zip_file.writestr(name, content)
    return buffer.getvalue()
