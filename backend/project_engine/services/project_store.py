"""In-memory project state backed by a pluggable storage backend."""

import logging
from datetime import datetime, timezone
from typing import Callable

from project_engine.exceptions import NoActiveProjectError
from project_engine.models import FileSet, Project, Version
from project_engine.models.project import generate_id
from project_engine.repositories import ProjectStorage

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProjectStore:
    """Tracks all projects, the open project and the selected version.

    Every version addition or project deletion rewrites the whole collection
    through the storage backend. There is no locking: concurrent writers
    overwrite each other.
    """

    def __init__(self, storage: ProjectStorage, clock: Callable[[], datetime] | None = None):
        self.storage = storage
        self.clock = clock or _utcnow
        self._projects: list[Project] = storage.load()
        self._current_project: Project | None = None
        self._selected_version_id: str | None = None
        self._edited_files: FileSet | None = None
        logger.info(f"Loaded {len(self._projects)} projects")

    @property
    def projects(self) -> list[Project]:
        """Persisted projects, most recently created first."""
        return list(self._projects)

    @property
    def current_project(self) -> Project | None:
        return self._current_project

    @property
    def selected_version(self) -> Version | None:
        """The version whose files are current (the newest unless one was loaded)."""
        project = self._current_project
        if project is None:
            return None
        if self._selected_version_id:
            version = project.get_version(self._selected_version_id)
            if version is not None:
                return version
        return project.latest_version

    @property
    def current_files(self) -> FileSet:
        """A copy of the working files.

        These are the selected version's files, with any unsaved edits applied.
        Empty with no project or version.
        """
        if self._edited_files is not None:
            return dict(self._edited_files)
        version = self.selected_version
        return dict(version.files) if version else {}

    @property
    def has_unsaved_edits(self) -> bool:
        return self._edited_files is not None

    def get_project(self, project_id: str) -> Project | None:
        """Find a persisted project by ID."""
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def reload(self) -> None:
        """Re-read the collection from storage and drop unsaved edits.

        The open project stays open if it is still stored or was never saved.
        """
        self._projects = self.storage.load()
        self._edited_files = None
        project = self._current_project
        if project is not None:
            persisted = self.get_project(project.id)
            if persisted is not None:
                self._current_project = persisted
            elif project.versions:
                logger.warning(f"Open project {project.id} is no longer stored, closing it")
                self._current_project = None
                self._selected_version_id = None
        logger.info(f"Reloaded {len(self._projects)} projects")

    def create_project(self, title: str) -> Project:
        """Start a new, empty project and make it current.

        The project is only persisted once its first version is added.
        """
        now = self.clock()
        project = Project(
            id=generate_id("project", now),
            title=title,
            versions=[],
            created_at=now,
            updated_at=now,
        )
        self._current_project = project
        self._selected_version_id = None
        self._edited_files = None
        logger.info(f"Created project {project.id} ({title!r})")
        return project

    def add_version(self, prompt: str, files: FileSet, snapshot: str | None = None) -> Version:
        """Prepend a new version to the current project and persist the collection.

        Raises:
            NoActiveProjectError: If no project is open
        """
        project = self._current_project
        if project is None:
            raise NoActiveProjectError("Cannot add a version without an open project")

        now = self.clock()
        version = Version(
            id=generate_id("version", now),
            prompt=prompt,
            files=dict(files),
            snapshot=snapshot,
            timestamp=now,
        )
        updated = project.model_copy(
            update={
                "versions": [version, *project.versions],
                "updated_at": max(now, project.updated_at),
            }
        )

        for i, existing in enumerate(self._projects):
            if existing.id == updated.id:
                self._projects[i] = updated
                break
        else:
            self._projects.insert(0, updated)

        self.storage.save(self._projects)
        self._current_project = updated
        self._selected_version_id = version.id
        self._edited_files = None
        logger.info(
            f"Added version {version.id} to project {updated.id} "
            f"({len(updated.versions)} versions, {len(files)} files)"
        )
        return version

    def edit_file(self, name: str, content: str) -> FileSet:
        """Overwrite or add one file in the working copy of the open project.

        Edits are not saved as a version. They are sent as the existing code
        with the next prompt and are dropped when a version is added or loaded
        or another project is opened.

        Raises:
            NoActiveProjectError: If no project is open
        """
        if self._current_project is None:
            raise NoActiveProjectError("Cannot edit files without an open project")
        files = self.current_files
        files[name] = content
        self._edited_files = files
        logger.info(f"Edited {name} in project {self._current_project.id}")
        return dict(files)

    def load_version(self, version_id: str) -> Version | None:
        """Make a version of the current project the source of the current files.

        Returns:
            The version, or None if there is no open project or no such version
            (the current files are left unchanged)
        """
        project = self._current_project
        if project is None:
            logger.warning(f"Cannot load version {version_id}: no open project")
            return None

        version = project.get_version(version_id)
        if version is None:
            logger.warning(f"Version {version_id} not found in project {project.id}")
            return None

        self._selected_version_id = version.id
        self._edited_files = None
        logger.info(f"Loaded version {version.id} of project {project.id}")
        return version

    def open_project(self, project_id: str) -> Project | None:
        """Make a persisted project current and select its newest version."""
        project = self.get_project(project_id)
        if project is None:
            logger.warning(f"Cannot open project {project_id}: not found")
            return None

        self._current_project = project
        self._selected_version_id = project.latest_version.id if project.versions else None
        self._edited_files = None
        logger.info(f"Opened project {project.id}")
        return project

    def delete_project(self, project_id: str) -> bool:
        """Delete a project by ID. Returns False if it did not exist."""
        is_current = self._current_project is not None and self._current_project.id == project_id
        remaining = [p for p in self._projects if p.id != project_id]
        persisted = len(remaining) != len(self._projects)
        if not persisted and not is_current:
            logger.warning(f"Cannot delete project {project_id}: not found")
            return False

        if persisted:
            self.storage.save(remaining)
            self._projects = remaining
        if is_current:
            # An unsaved (version-less) current project is discarded as well
            self._current_project = None
            self._selected_version_id = None
            self._edited_files = None
        logger.info(f"Deleted project {project_id}")
        return True
