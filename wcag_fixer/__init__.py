"""
wcag_fixer - Automatic accessibility remediation for HTML documents.

A document is acquired (file, HTTP or headless browser), run through a
fixed set of WCAG mutation rules, checked for invisible focus indicators,
remediated and written back out.

Usage:
    from wcag_fixer import Orchestrator

    result = await Orchestrator().run("./page.html", "fixed_output.html")
    print(result.describe())
"""

from .core.config import Settings, settings
from .orchestrator import Orchestrator, RunResult, FixPhase
from .contracts import FailureKind, FixerError

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "settings",
    "Orchestrator",
    "RunResult",
    "FixPhase",
    "FailureKind",
    "FixerError",
]
