"""
Fixers - Accessibility repair implementations.

Contains:
- deterministic/: Markup rules run in a fixed order
- FocusVisibleRemediator: Inline focus fix for detector findings

Usage:
    from wcag_fixer.fixers import create_default_engine, FocusVisibleRemediator

    engine = create_default_engine()
    engine.apply_all(document)
    FocusVisibleRemediator().apply(issues)
"""

from .focus_remediator import FocusVisibleRemediator
from .deterministic import (
    FixRule,
    RuleEngine,
    create_default_engine,
)


__all__ = [
    "FocusVisibleRemediator",
    "FixRule",
    "RuleEngine",
    "create_default_engine",
]
