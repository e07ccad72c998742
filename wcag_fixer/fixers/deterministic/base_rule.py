"""
FixRule - Abstract base class for deterministic accessibility rules.

Each rule mutates the shared DOMDocument in place and reports what it
changed. Rules are independent: a rule never relies on another rule having
run, and absence of its target elements is a no-op, not an error.

Usage:
    class MyFixRule(FixRule):
        @property
        def priority(self) -> int:
            return 10

        @property
        def wcag_criteria(self) -> List[str]:
            return ["1.3.4"]

        def apply(self, document: DOMDocument) -> RuleOutcome:
            outcome = self.outcome()
            for el in document.select("[orientation]"):
                del el["orientation"]
                outcome.changed += 1
            return outcome
"""

from abc import ABC, abstractmethod
from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome


class FixRule(ABC):
    """
    Abstract base class for deterministic fix rules.

    Subclasses must implement:
    - priority: Execution order (lower = earlier)
    - wcag_criteria: Success criteria the rule addresses
    - apply(): Mutate the document, return a RuleOutcome

    Contract:
    - Idempotent: applying a rule to its own output changes nothing
    - Total: any well-formed tree is accepted
    - Only attributes/content of existing elements change; new nodes are
      limited to <style>/<meta> under the document head
    """

    @property
    @abstractmethod
    def priority(self) -> int:
        """
        Execution priority. Lower values run first.

        Returns:
            Integer priority value
        """
        pass

    @property
    @abstractmethod
    def wcag_criteria(self) -> List[str]:
        """
        WCAG success criteria this rule addresses.

        Returns:
            List of criterion numbers (e.g. ["1.3.5"])
        """
        pass

    @property
    def name(self) -> str:
        """
        Rule name for logging and debugging.

        Returns:
            Class name by default
        """
        return self.__class__.__name__

    @abstractmethod
    def apply(self, document: DOMDocument) -> RuleOutcome:
        """
        Apply the rule to the document.

        Args:
            document: Shared document of the current run

        Returns:
            RuleOutcome describing the changes
        """
        pass

    def outcome(self) -> RuleOutcome:
        """Create an empty outcome for this rule."""
        return RuleOutcome(rule=self.name)

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.name}(wcag={self.wcag_criteria}, priority={self.priority})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, FixRule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        """Hash based on class name."""
        return hash(self.__class__.__name__)
