"""Persistence backends for the project history."""

from project_engine.repositories.storage import (
    InMemoryStorage,
    JsonFileStorage,
    ProjectStorage,
    RedisStorage,
    get_storage,
)

__all__ = [
    "ProjectStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "RedisStorage",
    "get_storage",
]
