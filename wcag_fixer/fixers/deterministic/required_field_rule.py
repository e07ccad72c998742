"""
RequiredFieldRule - Labels or instructions (WCAG 3.3.2).

A label whose text contains a required marker ("*" or "required") marks
the input that immediately follows it as required for assistive
technology. Nothing happens when the next element sibling is not an
<input>.
"""

from typing import List, Optional, Tuple

from bs4 import Tag

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class RequiredFieldRule(FixRule):
    """Set aria-required="true" on inputs following required-marked labels."""

    REQUIRED_MARKERS: Tuple[str, ...] = ("*", "required")

    @property
    def priority(self) -> int:
        return 120

    @property
    def wcag_criteria(self) -> List[str]:
        return ["3.3.2"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for label in document.get_elements_by_tag("label"):
            if not self.is_required_label(document.text_content(label)):
                continue
            sibling = document.next_element_sibling(label)
            if not self._is_input(sibling):
                continue
            if sibling.get("aria-required") != "true":
                sibling["aria-required"] = "true"
                outcome.changed += 1
        return outcome

    def is_required_label(self, text: str) -> bool:
        """Check whether label text carries a required marker (case-sensitive)."""
        return any(marker in text for marker in self.REQUIRED_MARKERS)

    @staticmethod
    def _is_input(element: Optional[Tag]) -> bool:
        return element is not None and element.name.lower() == "input"
