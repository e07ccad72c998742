"""
Browser Style Oracle - Computed outline styles from headless Chromium.

The post-mutation tree is loaded into a Playwright page once, and
window.getComputedStyle() is read for every focus candidate in a single
page.evaluate() call. Queries are then answered from those values, so
the detector stays synchronous.

Candidates are tagged with a temporary index attribute while the markup
is serialized. The browser may re-parent elements (table foster parenting,
implied end tags), so results are keyed by that index rather than by
position. The attribute is removed again before prepare() returns.

Usage:
    oracle = PlaywrightStyleOracle(document)
    await oracle.prepare()
    oracle.outline_style(document.select_one("button"))  # e.g. "none"
"""

import logging
from typing import Dict, List, Optional

from bs4 import Tag

from .dom_document import DOMDocument
from .interactive_detector import InteractiveDetector
from .style_oracle import StyleOracle


logger = logging.getLogger(__name__)


class PlaywrightStyleOracle(StyleOracle):
    """
    Outline styles of focus candidates as rendered by Chromium.

    Only outline-style of the candidates found by InteractiveDetector is
    known; every other element resolves to an empty style. Scripts are
    disabled in the rendering context: the tree already holds the
    post-script markup and must not be rebuilt by page code.
    """

    INDEX_ATTRIBUTE = "data-wcag-oracle-index"

    # Returns {index: outlineStyle} for every tagged element
    OUTLINE_STYLES_JS = """
    (attribute) => {
        const styles = {};
        for (const el of document.querySelectorAll(`[${attribute}]`)) {
            styles[el.getAttribute(attribute)] = window.getComputedStyle(el).outlineStyle;
        }
        return styles;
    }
    """

    def __init__(
        self,
        document: DOMDocument,
        interactive_detector: Optional[InteractiveDetector] = None,
        timeout_ms: int = 30000,
        headless: bool = True,
    ):
        """
        Initialize the oracle.

        Args:
            document: Document whose candidates will be queried
            interactive_detector: Candidate selection (same as the detector's)
            timeout_ms: Timeout for loading the markup into the page
            headless: Launch Chromium without a window
        """
        self._document = document
        self._interactive = interactive_detector or InteractiveDetector()
        self.timeout_ms = timeout_ms
        self.headless = headless
        self._styles: Optional[Dict[int, str]] = None

    @property
    def prepared(self) -> bool:
        return self._styles is not None

    async def prepare(self) -> None:
        """
        Render the current tree and read computed outline styles.

        Raises:
            RuntimeError: If Playwright is not installed
        """
        try:
            from playwright.async_api import async_playwright
        except ImportError as e:
            logger.error(
                "Playwright not installed. "
                "Run: pip install playwright && playwright install chromium"
            )
            raise RuntimeError("Playwright is not installed") from e

        candidates = self._interactive.find_focusable_elements(self._document)
        markup = self._tagged_markup(candidates)

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.headless)
            try:
                context = await browser.new_context(java_script_enabled=False)
                page = await context.new_page()
                await page.set_content(markup, wait_until="load", timeout=self.timeout_ms)
                raw = await page.evaluate(self.OUTLINE_STYLES_JS, self.INDEX_ATTRIBUTE)
            finally:
                await browser.close()

        self._styles = {
            id(element): raw[str(index)]
            for index, element in enumerate(candidates)
            if str(index) in raw
        }
        missing = len(candidates) - len(self._styles)
        if missing:
            logger.warning(f"{missing} focus candidate(s) not found in the rendered page")
        logger.info(f"Computed outline styles for {len(self._styles)} element(s)")

    def computed_style(self, element: Tag) -> Dict[str, str]:
        if self._styles is None:
            raise RuntimeError("PlaywrightStyleOracle queried before prepare()")
        value = self._styles.get(id(element))
        if value is None:
            return {}
        return {"outline-style": value}

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    def _tagged_markup(self, candidates: List[Tag]) -> str:
        """Serialize the tree with every candidate carrying its index."""
        for index, element in enumerate(candidates):
            element[self.INDEX_ATTRIBUTE] = str(index)
        try:
            return self._document.serialize()
        finally:
            for element in candidates:
                del element[self.INDEX_ATTRIBUTE]

    def __repr__(self) -> str:
        state = f"{len(self._styles)} styles" if self._styles is not None else "unprepared"
        return f"PlaywrightStyleOracle({state})"
