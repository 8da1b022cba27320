"""Client for the Pollinations text and image generation APIs."""

import logging
import random
import re
import time
from urllib.parse import quote, urlencode

import httpx

from project_engine.config import Settings
from project_engine.exceptions import GenerationError

logger = logging.getLogger(__name__)

# Words that mark a chat message as a request for a picture rather than code
IMAGE_KEYWORDS = [
    "image", "photo", "picture", "draw", "drawing", "sketch", "paint", "painting",
    "generate image", "create image", "make image", "show me", "visualize",
    "illustration", "art", "artwork", "graphic", "design", "logo", "icon",
    "portrait", "landscape", "scene", "render", "photograph", "pic", "img",
]

_IMAGE_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in sorted(IMAGE_KEYWORDS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def is_image_request(text: str) -> bool:
    """Check whether a message asks for an image (whole-word keyword match)."""
    return bool(_IMAGE_PATTERN.search(text))


class GenerationClient:
    """Sends prompts to the text API and builds image URLs.

    The text API takes the whole prompt as a URL path segment and answers
    with raw text. A non-success status is the only error signal.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = settings.generation_api_url.rstrip("/")
        self.image_base_url = settings.image_api_url.rstrip("/")
        self.model = settings.generation_model
        self.timeout = settings.generation_timeout_seconds
        self.image_size = settings.image_size
        self._transport = transport

    async def generate(self, prompt: str, context: str | None = None) -> str:
        """Send a prompt and return the raw reply text.

        Raises:
            GenerationError: On connection failure or a non-success status
        """
        full_prompt = f"{prompt}\n\nContext: {context}" if context else prompt
        url = f"{self.base_url}/{quote(full_prompt, safe='')}"
        params = {"model": self.model, "seed": int(time.time() * 1000)}

        logger.info(f"Calling text generation API ({self.model}, {len(full_prompt)} chars)...")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Generation API error: {e.response.status_code} - {e.response.text[:200]}")
            raise GenerationError(f"API error: {e.response.status_code}", e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error(f"Generation API request failed: {e}")
            raise GenerationError(f"API request failed: {e}") from e

        logger.info(f"Received {len(response.text)} chars from generation API")
        return response.text

    def image_url(self, prompt: str, seed: int | None = None) -> str:
        """Build the URL of an image generated for a prompt.

        The image API renders on GET, so no request is made here.
        """
        if seed is None:
            seed = random.randint(0, 999_999)
        query = urlencode({
            "width": self.image_size,
            "height": self.image_size,
            "seed": seed,
            "nologo": "true",
        })
        return f"{self.image_base_url}/prompt/{quote(prompt, safe='')}?{query}"
