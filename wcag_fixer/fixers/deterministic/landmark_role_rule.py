"""
LandmarkRoleRule - Identify purpose of regions (WCAG 1.3.6).

A <div> that carries an identifier but no explicit role is treated as a
named region of the page. Identifier presence is the only trigger:
containers without an id are left alone.
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class LandmarkRoleRule(FixRule):
    """Assign role="region" to identified <div> containers without a role."""

    CONTAINER_TAG = "div"
    DEFAULT_ROLE = "region"

    @property
    def priority(self) -> int:
        return 30

    @property
    def wcag_criteria(self) -> List[str]:
        return ["1.3.6"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for element in document.get_elements_by_tag(self.CONTAINER_TAG):
            # An empty id does not identify anything
            if not element.get("id") or element.has_attr("role"):
                continue
            element["role"] = self.DEFAULT_ROLE
            outcome.changed += 1
        return outcome
