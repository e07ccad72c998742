"""
Browser Acquirer - Render a URL in headless Chromium with Playwright.

The page is loaded until the configured load state and the serialized
DOM (after scripts ran) is returned, so dynamically built markup is
remediated too.
"""

import logging

from ..contracts.errors import AcquisitionError

from .base import DocumentAcquirer


logger = logging.getLogger(__name__)


class BrowserAcquirer(DocumentAcquirer):
    """
    Navigate to a URL and return page.content().

    A fresh browser is launched per acquisition and always closed,
    whether navigation succeeds or not.
    """

    def __init__(
        self,
        timeout_ms: int = 30000,
        wait_until: str = "domcontentloaded",
        headless: bool = True,
    ):
        """
        Initialize the acquirer.

        Args:
            timeout_ms: Navigation timeout
            wait_until: Playwright load state to wait for
            headless: Launch Chromium without a window
        """
        self.timeout_ms = timeout_ms
        self.wait_until = wait_until
        self.headless = headless

    async def acquire(self, source: str) -> str:
        try:
            from playwright.async_api import async_playwright
        except ImportError as e:
            logger.error(
                "Playwright not installed. "
                "Run: pip install playwright && playwright install chromium"
            )
            raise AcquisitionError("Playwright is not installed", source=source, cause=e) from e

        logger.info(f"Rendering {source} (wait_until={self.wait_until})")

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self.headless)
                try:
                    page = await browser.new_page()
                    await page.goto(source, wait_until=self.wait_until, timeout=self.timeout_ms)
                    return await page.content()
                finally:
                    await browser.close()
        except AcquisitionError:
            raise
        except Exception as e:
            logger.error(f"Browser acquisition of {source} failed: {e}")
            raise AcquisitionError(f"Browser failed to load {source}", source=source, cause=e) from e
