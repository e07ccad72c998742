"""
ViewportZoomRule - Allow text resizing (WCAG 1.4.4, 1.4.10).

The viewport meta tag must not prevent users from zooming. The first
<meta name="viewport"> gets a content descriptor that allows scaling up
to 3x. Documents without a viewport tag are left as they are.
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class ViewportZoomRule(FixRule):
    """Overwrite the viewport meta content so that user zoom is allowed."""

    SELECTOR = 'meta[name="viewport"]'
    CONTENT = "width=device-width, initial-scale=1, maximum-scale=3, user-scalable=yes"

    @property
    def priority(self) -> int:
        return 40

    @property
    def wcag_criteria(self) -> List[str]:
        return ["1.4.4", "1.4.10"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        meta = document.select_one(self.SELECTOR)
        if meta is None:
            outcome.details.append("no viewport meta")
            return outcome

        if meta.get("content") != self.CONTENT:
            meta["content"] = self.CONTENT
            outcome.changed += 1
        return outcome
