"""
Language Rules - Language of page and parts (WCAG 3.1.1, 3.1.2).

- DocumentLanguageRule: the <html> root gets lang="<default>" when it has
  no lang attribute. An existing value, even an empty one, is kept.
- LanguagePartsRule: elements selected by [lang] that lack a lang attribute
  get the default language. Every element matched by [lang] has the
  attribute (an empty value still counts as present), so this rule never
  changes anything. See DESIGN.md, "Open questions".
"""

from typing import List

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


class DocumentLanguageRule(FixRule):
    """Set the document language on the root element if missing."""

    def __init__(self, language: str = "en"):
        """
        Args:
            language: Locale code written to <html lang>
        """
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    @property
    def priority(self) -> int:
        return 80

    @property
    def wcag_criteria(self) -> List[str]:
        return ["3.1.1"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        if not document.root.has_attr("lang"):
            document.root["lang"] = self._language
            outcome.changed += 1
        return outcome


class LanguagePartsRule(FixRule):
    """Fill in the language of marked parts (no-op, see module docstring)."""

    def __init__(self, language: str = "en"):
        """
        Args:
            language: Locale code for parts without a language
        """
        self._language = language

    @property
    def priority(self) -> int:
        return 90

    @property
    def wcag_criteria(self) -> List[str]:
        return ["3.1.2"]

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        for element in document.select("[lang]"):
            if not element.has_attr("lang"):
                element["lang"] = self._language
                outcome.changed += 1
        return outcome
