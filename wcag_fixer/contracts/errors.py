"""
Error Types - Failure and issue classification for the fixer pipeline.

Two taxonomies live here:
- FailureKind: why a run aborted (acquisition, rule, persistence)
- IssueType: which accessibility issue the detector found on an element

Failures are raised as FixerError subclasses inside the pipeline and
converted by the orchestrator into a failed RunResult.
"""

from enum import Enum
from typing import Optional


class FailureKind(Enum):
    """Classification of errors that abort a run."""

    ACQUISITION = "acquisition"
    """Source could not be fetched, read, decoded or parsed."""

    RULE = "rule"
    """A rule, the detector or the remediator failed on the tree."""

    PERSISTENCE = "persistence"
    """The fixed document could not be written."""

    @classmethod
    def from_string(cls, value: str) -> "FailureKind":
        """Convert string to FailureKind, defaulting to RULE."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.RULE


class IssueType(Enum):
    """Accessibility issues derived from computed style."""

    FOCUS_NOT_VISIBLE = "focus_not_visible"
    """Interactive element has no visible outline (outline-style absent or none)."""

    @property
    def wcag_criterion(self) -> str:
        """WCAG success criterion the issue maps to."""
        return {
            IssueType.FOCUS_NOT_VISIBLE: "2.4.7",
        }[self]


class FixerError(Exception):
    """Base class for all pipeline failures."""

    kind: FailureKind = FailureKind.RULE

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class AcquisitionError(FixerError):
    """Raised when the source document cannot be obtained."""

    kind = FailureKind.ACQUISITION

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)
        self.source = source


class RuleError(FixerError):
    """Raised when a rule meets a tree shape it cannot handle."""

    kind = FailureKind.RULE

    def __init__(
        self,
        message: str,
        rule_name: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)
        self.rule_name = rule_name


class PersistenceError(FixerError):
    """Raised when the output file cannot be written."""

    kind = FailureKind.PERSISTENCE

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)
        self.path = path
