"""
Deterministic Fixers - Rule-based accessibility repairs.

Each rule mutates the shared document in place and reports a RuleOutcome.

Components:
- FixRule: Abstract base class for all fix rules
- RuleEngine: Orchestrates rule execution
- Concrete Rules: RemoveOrientationRule, AutocompleteRule, etc.

Usage:
    from wcag_fixer.fixers.deterministic import create_default_engine

    engine = create_default_engine()
    outcomes = engine.apply_all(document)
"""

from .base_rule import FixRule
from .rule_engine import RuleEngine, create_default_engine
from .orientation_rule import RemoveOrientationRule
from .autocomplete_rule import AutocompleteRule
from .landmark_role_rule import LandmarkRoleRule
from .viewport_rule import ViewportZoomRule
from .stylesheet_rules import (
    MARKER_ATTRIBUTE,
    EnsureStylesheetRule,
    ReflowStylesheetRule,
    FocusStylesheetRule,
)
from .label_title_rule import LabelTitleRule
from .language_rules import DocumentLanguageRule, LanguagePartsRule
from .timer_rule import TimerLiveRegionRule
from .new_tab_rule import NewTabWarningRule
from .required_field_rule import RequiredFieldRule
from .empty_id_rule import EmptyIdRule


__all__ = [
    # Base
    "FixRule",
    "RuleEngine",
    "create_default_engine",
    "MARKER_ATTRIBUTE",
    "EnsureStylesheetRule",
    # Rules
    "RemoveOrientationRule",
    "AutocompleteRule",
    "LandmarkRoleRule",
    "ViewportZoomRule",
    "ReflowStylesheetRule",
    "LabelTitleRule",
    "FocusStylesheetRule",
    "DocumentLanguageRule",
    "LanguagePartsRule",
    "TimerLiveRegionRule",
    "NewTabWarningRule",
    "RequiredFieldRule",
    "EmptyIdRule",
]
