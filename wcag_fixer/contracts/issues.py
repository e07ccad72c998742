"""
Issues - Records produced by the detector and consumed by the remediator.

A FocusIssue holds a live reference to the offending element. It is only
valid for the run that created it; the run result keeps the dict summary.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bs4 import Tag

from .errors import IssueType


@dataclass
class FocusIssue:
    """
    An interactive element without a visible focus indicator.

    Example:
        issue = FocusIssue(
            element=button,
            selector="#submit",
            outline_style=None,
        )
    """

    element: Tag
    """The flagged element in the run's tree."""

    selector: str
    """CSS selector identifying the element, for reporting."""

    outline_style: Optional[str] = None
    """Effective outline-style as resolved by the style oracle (None = absent)."""

    issue_type: IssueType = IssueType.FOCUS_NOT_VISIBLE
    """Issue classification."""

    @property
    def reason(self) -> str:
        """Human-readable reason the element was flagged."""
        if self.outline_style is None:
            return "outline-style is not set"
        return f"outline-style is {self.outline_style}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting (drops the element handle)."""
        return {
            "type": self.issue_type.value,
            "wcag": self.issue_type.wcag_criterion,
            "selector": self.selector,
            "tag": self.element.name,
            "outline_style": self.outline_style,
            "reason": self.reason,
        }

    def describe(self) -> str:
        """Generate human-readable description of the issue."""
        return f"{self.selector} <{self.element.name}>: {self.reason}"
