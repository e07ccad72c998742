"""
Contracts - Data structures for the fixer.

Provides:
- FailureKind, IssueType: Classification enums
- FixerError and subclasses: Pipeline failures
- FocusIssue: Detector output record
- RuleOutcome: Per-rule change summary
"""

from .errors import (
    FailureKind,
    IssueType,
    FixerError,
    AcquisitionError,
    RuleError,
    PersistenceError,
)
from .issues import FocusIssue
from .outcomes import RuleOutcome

__all__ = [
    "FailureKind",
    "IssueType",
    "FixerError",
    "AcquisitionError",
    "RuleError",
    "PersistenceError",
    "FocusIssue",
    "RuleOutcome",
]
