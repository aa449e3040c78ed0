"""
HTML to PDF conversion with headless Chromium (Playwright).
"""

import logging
from typing import Dict, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .exceptions import RenderingError

logger = logging.getLogger(__name__)

DEFAULT_MARGINS = {"top": "20mm", "bottom": "20mm"}
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class HtmlPdfRenderer:
    """Render an HTML page to an A4 PDF."""

    def __init__(self, page_format: str = "A4", margins: Optional[Dict[str, str]] = None,
                 timeout_ms: int = 30000):
        self.page_format = page_format
        self.margins = margins or dict(DEFAULT_MARGINS)
        self.timeout_ms = timeout_ms

    async def render(self, html: str) -> bytes:
        """Return the PDF bytes. Any engine failure becomes RenderingError."""
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True, args=BROWSER_ARGS)
                try:
                    page = await browser.new_page()
                    await page.set_content(html, wait_until="networkidle", timeout=self.timeout_ms)
                    return await page.pdf(
                        format=self.page_format,
                        print_background=True,
                        margin=self.margins,
                    )
                finally:
                    await browser.close()
        except (PlaywrightError, OSError) as e:
            logger.error(f"PDF rendering failed: {e}")
            raise RenderingError("PDF rendering failed") from e
