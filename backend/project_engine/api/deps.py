"""Dependency injection for FastAPI routes."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from project_engine.config import get_settings
from project_engine.repositories import get_storage
from project_engine.services.project_store import ProjectStore
from project_engine.services.website_generator import WebsiteGenerator


@lru_cache
def get_store() -> ProjectStore:
    """Get the process-wide project store."""
    return ProjectStore(get_storage(get_settings()))


@lru_cache
def get_generator() -> WebsiteGenerator:
    """Get the shared website generator."""
    return WebsiteGenerator(get_settings())


# Type aliases for dependency injection
Store = Annotated[ProjectStore, Depends(get_store)]
Generator = Annotated[WebsiteGenerator, Depends(get_generator)]
