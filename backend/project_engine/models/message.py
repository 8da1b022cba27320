"""Chat message exchanged while building a project."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from project_engine.models.project import FileSet, generate_id


class Message(BaseModel):
    """One turn of the chat transcript."""

    id: str = Field(default_factory=lambda: generate_id("msg"))
    role: Literal["user", "assistant", "system"]
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    files: FileSet | None = None
    image_url: str | None = None
