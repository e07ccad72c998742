"""
TimerLiveRegionRule - Timing adjustable (WCAG 2.2.1).

Countdown timers announced as live regions interrupt screen reader users
on every tick. Elements with role="timer" are set to aria-live="off".
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class TimerLiveRegionRule(FixRule):
    """Silence live announcements of timer elements."""

    SELECTOR = '[role="timer"]'

    @property
    def priority(self) -> int:
        return 100

    @property
    def wcag_criteria(self) -> List[str]:
        return ["2.2.1"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for element in document.select(self.SELECTOR):
            if element.get("aria-live") != "off":
                element["aria-live"] = "off"
                outcome.changed += 1
        return outcome
