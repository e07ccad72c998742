"""
LabelTitleRule - Labels or instructions (WCAG 3.3.2).

Every <label> without a title gets one equal to its current text content,
so the label text is also exposed as a tooltip.
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class LabelTitleRule(FixRule):
    """Copy label text into a title attribute when none is set."""

    @property
    def priority(self) -> int:
        return 60

    @property
    def wcag_criteria(self) -> List[str]:
        return ["3.3.2"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for label in document.get_elements_by_tag("label"):
            if label.has_attr("title"):
                continue
            label["title"] = document.text_content(label)
            outcome.changed += 1
        return outcome
