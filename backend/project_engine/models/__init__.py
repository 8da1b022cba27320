"""Domain models."""

from project_engine.models.message import Message
from project_engine.models.project import ENTRY_POINT, FileSet, Project, Version

__all__ = [
    "ENTRY_POINT",
    "FileSet",
    "Message",
    "Project",
    "Version",
]
