"""Turns chat prompts into website versions."""

import logging
from dataclasses import dataclass, field

from project_engine.config import Settings
from project_engine.exceptions import GenerationError
from project_engine.models import ENTRY_POINT, FileSet, Version
from project_engine.services.generation_client import GenerationClient, is_image_request
from project_engine.services.preview import fallback_files
from project_engine.services.project_store import ProjectStore
from project_engine.services.prompt_builder import build_prompt_for_files
from project_engine.services.response_parser import ResponseParser
from project_engine.services.snapshot import SnapshotService

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = (
    "Something went wrong. The API might be rate-limited. "
    "Please wait a moment and try again."
)
IMAGE_READY_MESSAGE = "Here's your generated image!"


@dataclass
class GenerationOutcome:
    """Result of handling one chat prompt."""
    success: bool
    message: str  # Shown to the user as the assistant reply
    files: FileSet = field(default_factory=dict)
    image_url: str | None = None
    version: Version | None = None  # Set only when a version was recorded


class WebsiteGenerator:
    """Runs a chat prompt through generation, parsing and version recording."""

    def __init__(
        self,
        settings: Settings,
        client: GenerationClient | None = None,
        snapshots: SnapshotService | None = None,
    ):
        self.settings = settings
        self.client = client or GenerationClient(settings)
        self.snapshots = snapshots or SnapshotService(settings)
        self.parser = ResponseParser()

    def title_from_prompt(self, text: str) -> str:
        """Title a new project after the prompt that started it."""
        limit = self.settings.default_project_title_length
        title = " ".join(text.split())
        if len(title) > limit:
            title = title[:limit].rstrip() + "..."
        return title

    async def handle_prompt(self, store: ProjectStore, user_input: str) -> GenerationOutcome:
        """Handle one chat prompt against the store's current project.

        Image requests get an image URL and leave the project untouched. Any
        other prompt is sent as a code generation request. A successful reply
        becomes a new version, creating the project first if none is open.
        When the first reply of a new project has no entry point, the starter
        template is recorded as its first version instead. Other failures
        never modify stored state.
        """
        text = user_input.strip()
        if not text:
            raise ValueError("Prompt cannot be empty")

        if is_image_request(text):
            return self._handle_image_request(text)

        if store.current_project is None:
            store.create_project(self.title_from_prompt(text))

        current_files = store.current_files
        prompt = build_prompt_for_files(text, current_files)

        try:
            raw = await self.client.generate(prompt)
        except GenerationError as e:
            logger.error(f"Generation failed: {e}")
            return self._failure(current_files, text)

        parsed = self.parser.parse(raw)
        if not parsed.is_valid:
            logger.warning(
                f"Reply had no {ENTRY_POINT} (got {sorted(parsed.files)}); "
                f"first 200 chars: {raw[:200]!r}"
            )
            if not store.current_project.versions:
                return self._start_from_template(store, text)
            return self._failure(current_files, text)

        snapshot = await self.snapshots.capture(parsed.files)
        version = store.add_version(text, parsed.files, snapshot)

        return GenerationOutcome(
            success=True,
            message=parsed.summary,
            files=parsed.files,
            version=version,
        )

    def _handle_image_request(self, text: str) -> GenerationOutcome:
        image_url = self.client.image_url(text)
        logger.info("Answered image request")
        return GenerationOutcome(success=True, message=IMAGE_READY_MESSAGE, image_url=image_url)

    def _start_from_template(self, store: ProjectStore, text: str) -> GenerationOutcome:
        files = fallback_files(text)
        version = store.add_version(text, files)
        logger.info(f"Started project {store.current_project.id} from the starter template")
        return GenerationOutcome(
            success=False,
            message=GENERATION_FAILED_MESSAGE,
            files=files,
            version=version,
        )

    def _failure(self, current_files: FileSet, text: str) -> GenerationOutcome:
        files = current_files if ENTRY_POINT in current_files else fallback_files(text)
        return GenerationOutcome(success=False, message=GENERATION_FAILED_MESSAGE, files=files)
