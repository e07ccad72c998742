"""
Outcomes - What a rule did to the tree during one run.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class RuleOutcome:
    """
    Result of applying one rule.

    Attributes:
        rule: Rule name
        changed: Number of elements changed or inserted
        details: Short notes (e.g. "no viewport meta")
    """

    rule: str
    changed: int = 0
    details: List[str] = field(default_factory=list)

    @property
    def was_noop(self) -> bool:
        """Check if the rule left the tree untouched."""
        return self.changed == 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        result = {"rule": self.rule, "changed": self.changed}
        if self.details:
            result["details"] = list(self.details)
        return result

    def describe(self) -> str:
        """Generate human-readable description."""
        text = f"{self.rule}: {self.changed} change(s)"
        if self.details:
            text += f" ({'; '.join(self.details)})"
        return text
