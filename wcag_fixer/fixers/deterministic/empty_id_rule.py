"""
EmptyIdRule - Parsing (WCAG 4.1.1).

An id attribute that is present but empty identifies nothing. Such
elements get a generated identifier "generated-id-<9 base-36 chars>".
Non-empty ids are never touched.
"""

import secrets
import string
from typing import Callable, List, Optional, Set

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


ID_ALPHABET = string.digits + string.ascii_lowercase


def random_id_suffix(length: int = 9) -> str:
    """Random base-36 suffix for generated ids."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


class EmptyIdRule(FixRule):
    """Replace empty id attributes with generated unique identifiers."""

    PREFIX = "generated-id-"

    def __init__(self, suffix_factory: Optional[Callable[[], str]] = None):
        """
        Args:
            suffix_factory: Produces id suffixes (random base-36 by default)
        """
        self._suffix_factory = suffix_factory or random_id_suffix

    @property
    def priority(self) -> int:
        return 130

    @property
    def wcag_criteria(self) -> List[str]:
        return ["4.1.1"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        elements = document.select("[id]")
        taken: Set[str] = {el.get("id") for el in elements if el.get("id")}

        for element in elements:
            if element.get("id"):
                continue
            new_id = self._generate(taken)
            element["id"] = new_id
            taken.add(new_id)
            outcome.changed += 1
        return outcome

    def _generate(self, taken: Set[str]) -> str:
        new_id = f"{self.PREFIX}{self._suffix_factory()}"
        while new_id in taken:
            new_id = f"{self.PREFIX}{self._suffix_factory()}"
        return new_id
