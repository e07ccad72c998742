"""
Stylesheet Rules - Inject accessibility CSS into the document head.

- ReflowStylesheetRule (WCAG 1.4.10): base font-size normalization plus a
  flex row/column utility pair so content reflows at narrow widths.
- FocusStylesheetRule (WCAG 2.4.7, 1.4.11): a uniform focus ring for
  interactive element types.

Both rules ensure their fragment is present rather than appending it
blindly. The <style> element is tagged with data-wcag-fix="<marker>", so
a second run finds it and leaves the head unchanged.
"""

from abc import abstractmethod
from typing import List, Optional

from bs4 import Tag
from bs4.element import Stylesheet

from ...analyzers.dom_document import DOMDocument
from ...contracts.outcomes import RuleOutcome

from .base_rule import FixRule


MARKER_ATTRIBUTE = "data-wcag-fix"


class EnsureStylesheetRule(FixRule):
    """
    Base for rules that guarantee one marked <style> fragment in <head>.

    Subclasses provide the marker and the CSS text.
    """

    @property
    @abstractmethod
    def marker(self) -> str:
        """Stable identifier of the fragment."""
        pass

    @property
    @abstractmethod
    def css(self) -> str:
        """Stylesheet text of the fragment."""
        pass

    def apply(self, document: DOMDocument) -> RuleOutcome:
        outcome = self.outcome()
        existing = self.find_fragment(document)

        if existing is None:
            style = document.new_tag("style", **{MARKER_ATTRIBUTE: self.marker})
            style.append(Stylesheet(self.css))
            document.head.append(style)
            outcome.changed += 1
        elif document.raw_text(existing) != self.css:
            existing.clear()
            existing.append(Stylesheet(self.css))
            outcome.changed += 1
            outcome.details.append("fragment updated")

        return outcome

    def find_fragment(self, document: DOMDocument) -> Optional[Tag]:
        """Locate this rule's fragment in the head, if already inserted."""
        return document.head.find("style", attrs={MARKER_ATTRIBUTE: self.marker})


class ReflowStylesheetRule(EnsureStylesheetRule):
    """Ensure the reflow-friendly stylesheet fragment is present."""

    CSS = (
        "\n"
        "body { font-size: 100%; }\n"
        ".row { display: flex; flex-wrap: wrap; }\n"
        ".col { flex: 1; }\n"
    )

    @property
    def priority(self) -> int:
        return 50

    @property
    def wcag_criteria(self) -> List[str]:
        return ["1.4.10"]

    @property
    def marker(self) -> str:
        return "reflow"

    @property
    def css(self) -> str:
        return self.CSS


class FocusStylesheetRule(EnsureStylesheetRule):
    """Ensure the focus-ring stylesheet fragment is present."""

    FOCUS_SELECTORS = (
        "a:focus",
        "button:focus",
        "input:focus",
        "select:focus",
        "textarea:focus",
    )

    def __init__(self, color: str = "#00f"):
        """
        Args:
            color: Focus ring colour
        """
        self._color = color

    @property
    def priority(self) -> int:
        return 70

    @property
    def wcag_criteria(self) -> List[str]:
        return ["2.4.7", "1.4.11"]

    @property
    def marker(self) -> str:
        return "focus"

    @property
    def css(self) -> str:
        return (
            "\n"
            f"{', '.join(self.FOCUS_SELECTORS)} {{\n"
            f"    outline: 2px solid {self._color};\n"
            "    outline-offset: 2px;\n"
            "}\n"
        )
