"""
AutocompleteRule - Identify input purpose (WCAG 1.3.5).

Every <input> without an autocomplete attribute gets autocomplete="on".
An explicit value, even an empty one, is never overwritten.
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class AutocompleteRule(FixRule):
    """Add autocomplete="on" to inputs that do not declare it."""

    DEFAULT_VALUE = "on"

    @property
    def priority(self) -> int:
        return 20

    @property
    def wcag_criteria(self) -> List[str]:
        return ["1.3.5"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for element in document.get_elements_by_tag("input"):
            if element.has_attr("autocomplete"):
                continue
            element["autocomplete"] = self.DEFAULT_VALUE
            outcome.changed += 1
        return outcome
