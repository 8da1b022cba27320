"""Build the text prompt sent to the generation API."""

import json

from project_engine.models import FileSet
from project_engine.prompts import (
    CODE_GENERATION_PROMPT,
    EXISTING_CODE_SECTION,
    USER_REQUEST_SECTION,
)


def serialize_files(files: FileSet) -> str:
    """Serialize a file set as compact JSON for embedding in a prompt."""
    return json.dumps(files, ensure_ascii=False)


def build_code_prompt(user_prompt: str, existing_code: str | None = None) -> str:
    """Build the generation prompt for a user instruction.

    Args:
        user_prompt: What the user asked for
        existing_code: Serialized current files to modify, if any

    Returns:
        The prompt text, deterministic for the same inputs
    """
    sections = [CODE_GENERATION_PROMPT]
    if existing_code:
        sections.append(EXISTING_CODE_SECTION.format(existing_code=existing_code))
    sections.append(USER_REQUEST_SECTION.format(user_prompt=user_prompt))
    return "\n\n".join(sections)


def build_prompt_for_files(user_prompt: str, files: FileSet) -> str:
    """Build the prompt, embedding the current files when there are any."""
    return build_code_prompt(user_prompt, serialize_files(files) if files else None)
