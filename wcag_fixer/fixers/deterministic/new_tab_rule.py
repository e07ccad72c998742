"""
NewTabWarningRule - Change on request (WCAG 3.2.5).

Links that open a new browsing context get a title warning the user.
Any existing title is replaced. The focus remediator runs after all
rules, so its title wins on links it flags.
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class NewTabWarningRule(FixRule):
    """Set title="Opens in a new tab" on target="_blank" links."""

    SELECTOR = 'a[target="_blank"]'
    TITLE = "Opens in a new tab"

    @property
    def priority(self) -> int:
        return 110

    @property
    def wcag_criteria(self) -> List[str]:
        return ["3.2.5"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for link in document.select(self.SELECTOR):
            if link.get("title") != self.TITLE:
                link["title"] = self.TITLE
                outcome.changed += 1
        return outcome
