"""
Orchestrator Contracts - Data structures for the fixer pipeline.

Defines FixPhase, RunMetrics and RunResult.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..contracts.errors import FailureKind
from ..contracts.outcomes import RuleOutcome


class FixPhase(Enum):
    """
    Phases in the fix pipeline.

    A run walks them in this order and stops at the first failure.
    """

    ACQUIRE = "acquire"
    """Source document fetched or read."""

    PARSE = "parse"
    """HTML parsed into the run's DOMDocument."""

    MUTATE = "mutate"
    """Deterministic rules applied via RuleEngine."""

    DETECT = "detect"
    """Focus visibility issues detected."""

    REMEDIATE = "remediate"
    """Flagged elements fixed."""

    SERIALIZE = "serialize"
    """Tree serialized back to HTML."""

    PERSIST = "persist"
    """Output file written."""

    COMPLETE = "complete"
    """Pipeline completed."""


@dataclass
class RunMetrics:
    """
    Metrics from one run.

    Tracks timing and change counts for logging and reporting.
    """

    # Timing
    total_duration_ms: float = 0.0
    """Total time for the entire run."""

    acquisition_time_ms: float = 0.0
    """Time spent obtaining the source."""

    rules_time_ms: float = 0.0
    """Time spent in the rule pass."""

    detection_time_ms: float = 0.0
    """Time spent detecting and remediating focus issues."""

    # Change statistics
    rules_changed: int = 0
    """Elements changed or inserted by the rule pass."""

    issues_found: int = 0
    """Focus issues reported by the detector."""

    elements_remediated: int = 0
    """Elements fixed by the remediator."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_duration_ms": round(self.total_duration_ms, 1),
            "acquisition_time_ms": round(self.acquisition_time_ms, 1),
            "rules_time_ms": round(self.rules_time_ms, 1),
            "detection_time_ms": round(self.detection_time_ms, 1),
            "rules_changed": self.rules_changed,
            "issues_found": self.issues_found,
            "elements_remediated": self.elements_remediated,
        }

    def describe(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Duration: {self.total_duration_ms:.0f}ms",
            f"  - Acquisition: {self.acquisition_time_ms:.0f}ms",
            f"  - Rules: {self.rules_time_ms:.0f}ms",
            f"  - Detection: {self.detection_time_ms:.0f}ms",
            f"Rule changes: {self.rules_changed}",
            f"Focus issues: {self.issues_found} ({self.elements_remediated} fixed)",
        ]
        return "\n".join(lines)


@dataclass
class RunResult:
    """
    Result of one pipeline run.

    On failure, failure_kind and error_message are set, fixed_html may be
    None and no output file was written.
    """

    success: bool
    """True if every phase completed."""

    source: Optional[str] = None
    """Where the document came from (None for in-memory runs)."""

    output_path: Optional[str] = None
    """File the fixed HTML was written to, if persisted."""

    fixed_html: Optional[str] = None
    """Serialized fixed document."""

    failure_kind: Optional[FailureKind] = None
    """Why the run aborted."""

    error_message: Optional[str] = None
    """Error message if the run failed."""

    rule_outcomes: List[RuleOutcome] = field(default_factory=list)
    """Outcome of every rule, in execution order."""

    issues: List[Dict[str, Any]] = field(default_factory=list)
    """Summaries of detected focus issues."""

    phases_completed: List[FixPhase] = field(default_factory=list)
    """Phases that completed successfully."""

    metrics: RunMetrics = field(default_factory=RunMetrics)
    """Timing and change counts."""

    @property
    def changed_rules(self) -> List[str]:
        """Names of rules that changed the tree."""
        return [o.rule for o in self.rule_outcomes if not o.was_noop]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (omits the HTML)."""
        return {
            "success": self.success,
            "source": self.source,
            "output_path": self.output_path,
            "failure_kind": self.failure_kind.value if self.failure_kind else None,
            "error_message": self.error_message,
            "rule_outcomes": [o.to_dict() for o in self.rule_outcomes],
            "issues": list(self.issues),
            "phases_completed": [p.value for p in self.phases_completed],
            "metrics": self.metrics.to_dict(),
        }

    def describe(self) -> str:
        """Generate human-readable summary."""
        if self.success:
            status = "SUCCESS"
        else:
            kind = self.failure_kind.value if self.failure_kind else "unknown"
            status = f"FAILED ({kind})"

        lines = [
            f"RunResult: {status}",
            f"  Source: {self.source or '<memory>'}",
            f"  Phases: {' -> '.join(p.value for p in self.phases_completed)}",
            f"  Rules changed: {', '.join(self.changed_rules) or 'none'}",
            f"  Focus issues: {len(self.issues)}",
            f"  Duration: {self.metrics.total_duration_ms:.0f}ms",
        ]

        if self.output_path:
            lines.append(f"  Output: {self.output_path}")
        if self.error_message:
            lines.append(f"  Error: {self.error_message}")

        return "\n".join(lines)
