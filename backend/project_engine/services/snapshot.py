"""Preview snapshot capture using Playwright."""

import base64
import logging
from typing import Optional

from playwright.async_api import async_playwright

from project_engine.config import Settings
from project_engine.models import FileSet
from project_engine.services.preview import render_preview

logger = logging.getLogger(__name__)

VIEWPORT = {"width": 1280, "height": 800}


class SnapshotService:
    """Renders a project's preview in a remote browser and screenshots it."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize snapshot service.

        Args:
            settings: Application settings. If None, uses default settings.
        """
        if settings is None:
            from project_engine.config import get_settings
            settings = get_settings()
        self.enabled = settings.snapshot_enabled
        self.ws_endpoint = settings.playwright_ws_url
        self.scale = settings.snapshot_scale
        self.quality = settings.snapshot_quality

    async def capture(self, files: FileSet, timeout: int = 15000) -> str | None:
        """Capture a low-resolution JPEG of the rendered preview.

        Args:
            files: The project files to render
            timeout: Maximum time to wait for the page (milliseconds), default 15s

        Returns:
            The screenshot as a data URL, or None if capture is disabled or failed.
            A missing snapshot never blocks version creation.
        """
        if not self.enabled:
            return None

        html = render_preview(files)
        try:
            async with async_playwright() as p:
                # Connect to the remote browser via WebSocket
                browser = await p.chromium.connect_over_cdp(self.ws_endpoint)
                page = await browser.new_page(viewport=VIEWPORT, device_scale_factor=self.scale)
                try:
                    await page.set_content(html, wait_until="load", timeout=timeout)
                    # Let entry animations settle
                    await page.wait_for_timeout(500)
                    image = await page.screenshot(type="jpeg", quality=self.quality)
                finally:
                    await page.close()
                    await browser.close()
        except Exception as e:
            logger.error(f"Failed to capture snapshot: {e}")
            return None

        logger.info(f"Captured preview snapshot ({len(image)} bytes)")
        return f"data:image/jpeg;base64,{base64.b64encode(image).decode('ascii')}"
