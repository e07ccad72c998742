"""
RemoveOrientationRule - Drop orientation locks (WCAG 1.3.4).

Content must not restrict its view to a single display orientation.
The `orientation` presentation attribute is removed wherever it appears,
without a replacement value.
"""

import logging
from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


logger = logging.getLogger(__name__)


class RemoveOrientationRule(FixRule):
    """Remove the orientation attribute from every element carrying it."""

    ATTRIBUTE = "orientation"

    @property
    def priority(self) -> int:
        return 10

    @property
    def wcag_criteria(self) -> List[str]:
        return ["1.3.4"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for element in document.select(f"[{self.ATTRIBUTE}]"):
            del element[self.ATTRIBUTE]
            outcome.changed += 1
            logger.debug(f"Removed {self.ATTRIBUTE} from <{element.name}>")
        return outcome
