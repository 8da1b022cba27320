"""Business logic services."""

from project_engine.services.generation_client import GenerationClient, is_image_request
from project_engine.services.project_store import ProjectStore
from project_engine.services.response_parser import ParsedResponse, ResponseParser, parse_response
from project_engine.services.website_generator import GenerationOutcome, WebsiteGenerator

__all__ = [
    "GenerationClient",
    "is_image_request",
    "ProjectStore",
    "ParsedResponse",
    "ResponseParser",
    "parse_response",
    "GenerationOutcome",
    "WebsiteGenerator",
]
