"""Project and version records for generated websites."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

# filename -> file content, flat namespace
FileSet = dict[str, str]

ENTRY_POINT = "index.html"


def generate_id(prefix: str, now: datetime | None = None) -> str:
    """Build a unique ID that sorts by creation time (e.g. version_1718000000000_3fa2c1d9)."""
    now = now or datetime.now(timezone.utc)
    return f"{prefix}_{int(now.timestamp() * 1000)}_{uuid4().hex[:8]}"


class Version(BaseModel):
    """A full snapshot of a project's files produced by one prompt."""

    model_config = ConfigDict(frozen=True)

    id: str
    prompt: str
    files: FileSet
    snapshot: str | None = None  # Preview image as a data URL
    timestamp: datetime


class Project(BaseModel):
    """A generated website and its version history, newest version first."""

    id: str
    title: str
    versions: list[Version] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @property
    def latest_version(self) -> Version | None:
        return self.versions[0] if self.versions else None

    def get_version(self, version_id: str) -> Version | None:
        """Find a version by ID."""
        for version in self.versions:
            if version.id == version_id:
                return version
        return None
