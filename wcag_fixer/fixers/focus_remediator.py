"""
Focus Visible Remediator - Give flagged elements a visible focus ring.

Consumes the FocusIssue list produced by the detector and writes an inline
outline onto each flagged element. Runs after every mutation rule, so the
title it sets replaces any title an earlier rule wrote.

Usage:
    remediator = FocusVisibleRemediator(color="#00f")
    outcome = remediator.apply(issues)
"""

import logging
from typing import Iterable

from ..analyzers.css_parser import merge_inline_style
from ..contracts.issues import FocusIssue
from ..contracts.outcomes import RuleOutcome


logger = logging.getLogger(__name__)


class FocusVisibleRemediator:
    """
    Applies the inline focus fix to every flagged element.

    Each element gets:
    - style: outline: 2px solid <color>; outline-offset: 2px
      (other inline declarations kept, outline longhands dropped)
    - title="Focus visible fix applied"
    """

    TITLE = "Focus visible fix applied"
    OUTLINE_WIDTH = "2px"
    OUTLINE_OFFSET = "2px"
    SUPERSEDED = ("outline-style", "outline-width", "outline-color")

    def __init__(self, color: str = "#00f"):
        """
        Args:
            color: Outline colour
        """
        self._color = color

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def declarations(self):
        """Inline declarations written onto flagged elements."""
        return {
            "outline": f"{self.OUTLINE_WIDTH} solid {self._color}",
            "outline-offset": self.OUTLINE_OFFSET,
        }

    def apply(self, issues: Iterable[FocusIssue]) -> RuleOutcome:
        """
        Fix every issue's element in place.

        Args:
            issues: Detector output for the current tree

        Returns:
            RuleOutcome counting the elements fixed
        """
        outcome = RuleOutcome(rule=self.name)
        declarations = self.declarations

        for issue in issues:
            element = issue.element
            element["style"] = merge_inline_style(
                element.get("style"), declarations, remove=self.SUPERSEDED
            )
            element["title"] = self.TITLE
            outcome.changed += 1
            logger.debug(f"Focus fix applied to {issue.selector}")

        if outcome.changed:
            logger.info(f"Applied focus fix to {outcome.changed} element(s)")
        return outcome

    def __repr__(self) -> str:
        return f"FocusVisibleRemediator(color={self._color!r})"
