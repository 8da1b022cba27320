"""Domain exceptions."""


class ProjectEngineError(Exception):
    """Base class for all project engine errors."""


class GenerationError(ProjectEngineError):
    """The text generation API failed or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NoActiveProjectError(ProjectEngineError):
    """An operation needed a current project but none is open."""

