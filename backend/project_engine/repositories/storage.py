"""Key-value persistence for the serialized project collection.

The whole history lives in one JSON array stored under a single fixed key.
There is no schema version: anything that fails to parse or validate is
logged and treated as an empty history.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

import redis
from pydantic import TypeAdapter, ValidationError

from project_engine.config import Settings
from project_engine.models import Project

logger = logging.getLogger(__name__)

_projects_adapter = TypeAdapter(list[Project])


def encode_projects(projects: list[Project]) -> str:
    """Serialize a project collection to its stored JSON form."""
    return _projects_adapter.dump_json(projects).decode("utf-8")


def decode_projects(data: str | bytes | None) -> list[Project]:
    """Parse a stored collection, degrading to an empty list on any mismatch."""
    if not data:
        return []
    try:
        return _projects_adapter.validate_json(data)
    except ValidationError as e:
        logger.error(f"Failed to load projects, discarding stored history: {e}")
        return []


class ProjectStorage(Protocol):
    """Loads and saves the full project collection."""

    def load(self) -> list[Project]:
        ...

    def save(self, projects: list[Project]) -> None:
        ...


class InMemoryStorage:
    """Storage kept in process memory, serialized like the real backends."""

    def __init__(self, data: str | None = None):
        self.data = data

    def load(self) -> list[Project]:
        return decode_projects(self.data)

    def save(self, projects: list[Project]) -> None:
        self.data = encode_projects(projects)


class JsonFileStorage:
    """Storage as a single JSON file named after the storage key."""

    def __init__(self, directory: str | Path, key: str):
        self.path = Path(directory) / f"{key}.json"

    def load(self) -> list[Project]:
        if not self.path.exists():
            return []
        try:
            data = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            return []
        return decode_projects(data)

    def save(self, projects: list[Project]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Readers only ever see a complete file
        tmp = tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
        )
        try:
            with tmp:
                tmp.write(encode_projects(projects))
            os.replace(tmp.name, self.path)
        except BaseException:
            Path(tmp.name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(projects)} projects to {self.path}")


class RedisStorage:
    """Storage as a single Redis string under the storage key."""

    def __init__(self, key: str, redis_url: str | None = None, client: redis.Redis | None = None):
        if client is None:
            if redis_url is None:
                raise ValueError("RedisStorage needs either redis_url or client")
            client = redis.from_url(redis_url, decode_responses=True)
        self.redis = client
        self.key = key

    def load(self) -> list[Project]:
        return decode_projects(self.redis.get(self.key))

    def save(self, projects: list[Project]) -> None:
        self.redis.set(self.key, encode_projects(projects))


def get_storage(settings: Settings) -> ProjectStorage:
    """Create the storage backend selected by settings.storage_backend."""
    if settings.storage_backend == "redis":
        logger.info(f"Using Redis project storage at {settings.redis_url}")
        return RedisStorage(settings.storage_key, redis_url=settings.redis_url)
    if settings.storage_backend == "memory":
        logger.info("Using in-memory project storage")
        return InMemoryStorage()
    logger.info(f"Using file project storage in {settings.storage_dir}")
    return JsonFileStorage(settings.storage_dir, settings.storage_key)
