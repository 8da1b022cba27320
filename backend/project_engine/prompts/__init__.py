"""LLM prompts for website generation."""

from project_engine.prompts.code_generation import (
    CODE_GENERATION_PROMPT,
    EXISTING_CODE_SECTION,
    USER_REQUEST_SECTION,
)

__all__ = [
    "CODE_GENERATION_PROMPT",
    "EXISTING_CODE_SECTION",
    "USER_REQUEST_SECTION",
]
