"""
RuleEngine - Orchestrates fix rule execution.

Maintains an ordered registry of rules and applies them, one after the
other, to the shared document of a run.

Usage:
    from wcag_fixer.fixers.deterministic import RuleEngine, create_default_engine

    # Use default engine with all rules
    engine = create_default_engine()
    outcomes = engine.apply_all(document)

    # Or build custom engine
    engine = RuleEngine()
    engine.register(AutocompleteRule())
    engine.register(DocumentLanguageRule(language="fr"))
    outcomes = engine.apply_all(document)
"""

from typing import List, Optional, Type
import logging

from ...analyzers.dom_document import DOMDocument
from ...contracts.errors import FixerError, RuleError
from ...contracts.outcomes import RuleOutcome
from ...core.config import Settings, settings as default_settings

from .base_rule import FixRule


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Orchestrates deterministic fix rule execution.

    Rules run in ascending priority; rules sharing a priority keep their
    registration order. Every rule runs exactly once per apply_all() call
    over the same tree, so later rules observe earlier rules' changes.

    A rule that raises aborts the pass: the exception is wrapped in a
    RuleError naming the rule and propagated to the caller.
    """

    def __init__(self):
        """Initialize the rule engine."""
        self._rules: List[FixRule] = []

    def register(self, rule: FixRule) -> None:
        """
        Register a fix rule.

        Args:
            rule: FixRule instance to register
        """
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.priority)
        logger.debug(f"Registered rule: {rule.name}")

    def register_all(self, rules: List[FixRule]) -> None:
        """
        Register multiple rules at once.

        Args:
            rules: List of FixRule instances
        """
        for rule in rules:
            self.register(rule)

    def unregister(self, rule_class: Type[FixRule]) -> bool:
        """
        Unregister a rule by class.

        Args:
            rule_class: Class of rule to remove

        Returns:
            True if rule was found and removed
        """
        original_count = len(self._rules)
        self._rules = [r for r in self._rules if not isinstance(r, rule_class)]
        removed = len(self._rules) < original_count
        if removed:
            logger.debug(f"Unregistered rule: {rule_class.__name__}")
        return removed

    def get_rule(self, rule_class: Type[FixRule]) -> Optional[FixRule]:
        """
        Get the registered instance of a rule class.

        Args:
            rule_class: Class to look up

        Returns:
            Rule instance or None
        """
        for rule in self._rules:
            if isinstance(rule, rule_class):
                return rule
        return None

    def apply_all(self, document: DOMDocument) -> List[RuleOutcome]:
        """
        Apply every registered rule to the document, in order.

        Args:
            document: Shared document of the current run

        Returns:
            One RuleOutcome per rule, in execution order

        Raises:
            RuleError: If any rule fails
        """
        outcomes: List[RuleOutcome] = []

        for rule in self._rules:
            outcomes.append(self.apply_rule(rule, document))

        changed = sum(o.changed for o in outcomes)
        logger.info(
            f"Applied {len(outcomes)} rules: {changed} change(s), "
            f"{sum(1 for o in outcomes if o.was_noop)} no-op"
        )
        return outcomes

    def apply_rule(self, rule: FixRule, document: DOMDocument) -> RuleOutcome:
        """
        Apply a single rule, wrapping failures in RuleError.

        Args:
            rule: Rule to apply
            document: Document to mutate

        Returns:
            RuleOutcome from the rule
        """
        try:
            outcome = rule.apply(document)
        except FixerError:
            raise
        except Exception as e:
            logger.error(f"Rule {rule.name} failed: {e}")
            raise RuleError(f"Rule {rule.name} failed", rule_name=rule.name, cause=e) from e

        if outcome.changed:
            logger.info(f"Rule {rule.name}: {outcome.changed} change(s)")
        else:
            logger.debug(f"Rule {rule.name}: no changes")
        return outcome

    @property
    def rules(self) -> List[FixRule]:
        """Get all registered rules (sorted by priority)."""
        return self._rules.copy()

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine({len(self._rules)} rules)"


def create_default_engine(settings: Optional[Settings] = None) -> RuleEngine:
    """
    Create a RuleEngine with the fixed rule set registered.

    Args:
        settings: Settings providing the default language and focus colour

    Returns:
        Configured RuleEngine ready to use
    """
    from .orientation_rule import RemoveOrientationRule
    from .autocomplete_rule import AutocompleteRule
    from .landmark_role_rule import LandmarkRoleRule
    from .viewport_rule import ViewportZoomRule
    from .stylesheet_rules import ReflowStylesheetRule, FocusStylesheetRule
    from .label_title_rule import LabelTitleRule
    from .language_rules import DocumentLanguageRule, LanguagePartsRule
    from .timer_rule import TimerLiveRegionRule
    from .new_tab_rule import NewTabWarningRule
    from .required_field_rule import RequiredFieldRule
    from .empty_id_rule import EmptyIdRule

    settings = settings or default_settings
    language = settings.DEFAULT_LANGUAGE

    engine = RuleEngine()
    engine.register_all([
        RemoveOrientationRule(),                             # 10 - WCAG 1.3.4
        AutocompleteRule(),                                  # 20 - WCAG 1.3.5
        LandmarkRoleRule(),                                  # 30 - WCAG 1.3.6
        ViewportZoomRule(),                                  # 40 - WCAG 1.4.4
        ReflowStylesheetRule(),                              # 50 - WCAG 1.4.10
        LabelTitleRule(),                                    # 60 - WCAG 3.3.2
        FocusStylesheetRule(color=settings.FOCUS_MARKER_COLOR),  # 70 - WCAG 2.4.7
        DocumentLanguageRule(language=language),             # 80 - WCAG 3.1.1
        LanguagePartsRule(language=language),                # 90 - WCAG 3.1.2
        TimerLiveRegionRule(),                               # 100 - WCAG 2.2.1
        NewTabWarningRule(),                                 # 110 - WCAG 3.2.5
        RequiredFieldRule(),                                 # 120 - WCAG 3.3.2
        EmptyIdRule(),                                       # 130 - WCAG 4.1.1
    ])

    logger.info(f"Created default engine with {len(engine)} rules")
    return engine
