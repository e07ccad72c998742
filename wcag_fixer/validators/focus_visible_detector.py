"""
Focus Visible Detector - Find focus candidates without a visible outline.

WCAG 2.4.7 requires a visible keyboard focus indicator. The check is made
on effective style, not markup: an element is flagged when its resolved
outline-style is absent or "none".

This is a read-only pass. It never mutates the tree; the remediator acts
on its output.
"""

import logging
from typing import List, Optional

from ..analyzers.dom_document import DOMDocument
from ..analyzers.interactive_detector import InteractiveDetector
from ..analyzers.style_oracle import StyleOracle
from ..contracts.issues import FocusIssue


logger = logging.getLogger(__name__)


class FocusVisibleDetector:
    """
    Detects interactive elements whose outline is not visible.

    Usage:
        detector = FocusVisibleDetector()
        issues = detector.detect(document, CascadeStyleOracle(document))
        for issue in issues:
            print(issue.describe())
    """

    def __init__(self, interactive_detector: Optional[InteractiveDetector] = None):
        self._interactive = interactive_detector or InteractiveDetector()

    def detect(self, document: DOMDocument, oracle: StyleOracle) -> List[FocusIssue]:
        """
        Scan every focus candidate of the document.

        Args:
            document: Post-mutation document
            oracle: Style oracle bound to the same document

        Returns:
            Issues in document order, at most one per element
        """
        issues: List[FocusIssue] = []

        for element in self._interactive.find_focusable_elements(document):
            outline_style = oracle.outline_style(element)
            if not self.is_invisible(outline_style):
                continue
            issues.append(FocusIssue(
                element=element,
                selector=document.generate_selector(element),
                outline_style=outline_style,
            ))

        logger.info(f"Focus visibility check: {len(issues)} issue(s)")
        return issues

    @staticmethod
    def is_invisible(outline_style: Optional[str]) -> bool:
        """An outline is invisible when unset or explicitly none."""
        return outline_style is None or outline_style == "none"
