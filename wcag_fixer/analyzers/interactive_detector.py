"""
Interactive Detector - Find elements that can receive keyboard focus.

These are the candidates of the focus-visibility check: anchors, buttons,
form controls, and any element with an explicit tabindex.

Usage:
    from wcag_fixer.analyzers import DOMDocument, InteractiveDetector

    document = DOMDocument(html_string)
    detector = InteractiveDetector()
    for element in detector.find_focusable_elements(document):
        print(element.name)
"""

from typing import List, Set

from bs4 import Tag

from .dom_document import DOMDocument


class InteractiveDetector:
    """
    Detects focusable interactive elements in a document.

    Selection is markup-only (tag name or tabindex presence); whether
    the element is disabled or hidden does not matter here.
    """

    # Tags that are inherently interactive
    INTERACTIVE_TAGS: Set[str] = {
        "a",
        "button",
        "input",
        "select",
        "textarea",
    }

    # Equivalent selector, kept for callers that query the tree directly
    FOCUSABLE_SELECTOR = "a, button, input, select, textarea, [tabindex]"

    def find_focusable_elements(self, document: DOMDocument) -> List[Tag]:
        """
        Find all focus candidates in document order.

        Each element is returned once even when it matches several
        criteria (e.g. <button tabindex="0">).

        Args:
            document: Document to scan

        Returns:
            List of Tags in document order
        """
        return [el for el in document.get_all_elements() if self.is_focusable(el)]

    def is_focusable(self, element: Tag) -> bool:
        """
        Determine if an element is a focus candidate.

        Args:
            element: BeautifulSoup Tag

        Returns:
            True for interactive tags and elements carrying tabindex
        """
        if element.name and element.name.lower() in self.INTERACTIVE_TAGS:
            return True
        return element.has_attr("tabindex")

    def __repr__(self) -> str:
        """String representation."""
        return "InteractiveDetector()"
