"""
DOM Document - The mutable tree a fixer run operates on.

Wraps BeautifulSoup with the handles the rules need (document root and head),
CSS selector queries, and deterministic serialization. One DOMDocument is
created per run and passed explicitly to every rule, the detector and the
remediator.

Usage:
    from wcag_fixer.analyzers import DOMDocument

    document = DOMDocument(html_string)
    for label in document.select("label"):
        print(document.text_content(label))
    fixed_html = document.serialize()
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from ..core.selector import SelectorService


# Minimal escaping, void elements written HTML-style (<input>, not <input/>)
HTML_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


class DOMDocument:
    """
    Parsed, mutable HTML document.

    On construction the tree is normalized to the skeleton every browser
    parser guarantees: an <html> root element and a <head> inside it.
    Bare fragments are wrapped in <html><body>. Nothing else is created.
    """

    PARSER = "html.parser"

    def __init__(self, html: str, source: Optional[str] = None):
        """
        Initialize the document from HTML content.

        Args:
            html: Raw HTML string to parse
            source: URL or path the HTML came from (for logging)
        """
        self._html = html
        self._source = source
        self._soup = BeautifulSoup(html, self.PARSER)
        self._drop_doctype_whitespace()
        self._root = self._ensure_root()
        self._head = self._ensure_head()

    @property
    def soup(self) -> BeautifulSoup:
        """Access the underlying BeautifulSoup object."""
        return self._soup

    @property
    def html(self) -> str:
        """Access the original HTML string."""
        return self._html

    @property
    def source(self) -> Optional[str]:
        """Where the HTML was acquired from, if known."""
        return self._source

    @property
    def root(self) -> Tag:
        """The document element (<html>)."""
        return self._root

    @property
    def head(self) -> Tag:
        """The document <head>."""
        return self._head

    @property
    def body(self) -> Optional[Tag]:
        """The document <body>, if the markup has one."""
        return self._root.find("body")

    # =========================================================================
    # ELEMENT SELECTION
    # =========================================================================

    def select(self, selector: str) -> List[Tag]:
        """
        Get all elements matching a CSS selector, in document order.

        Args:
            selector: CSS selector string (e.g., "a[target='_blank']")

        Returns:
            List of matching Tags (may be empty)
        """
        return self._soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        """
        Get first element matching CSS selector.

        Args:
            selector: CSS selector string

        Returns:
            First matching Tag or None
        """
        return self._soup.select_one(selector)

    def get_all_elements(self) -> List[Tag]:
        """Get all Tag elements in document order."""
        return [el for el in self._soup.descendants if isinstance(el, Tag)]

    def get_elements_by_tag(self, tag_name: str) -> List[Tag]:
        """Get all elements with a specific tag name."""
        return self._soup.find_all(tag_name)

    def new_tag(self, tag_name: str, **attrs: str) -> Tag:
        """Create a detached element owned by this document."""
        return self._soup.new_tag(tag_name, attrs=attrs)

    # =========================================================================
    # ELEMENT HELPERS
    # =========================================================================

    @staticmethod
    def text_content(element: Tag) -> str:
        """
        Get the text content of an element.

        Matches DOM textContent: all descendant text concatenated, with
        whitespace preserved and comments excluded.
        """
        return element.get_text()

    @staticmethod
    def raw_text(element: Tag) -> str:
        """
        Get the raw text of a <style> or <script> element.

        get_text() only returns strings of the container's own string class,
        which misses text added as plain NavigableString.
        """
        return "".join(
            str(node) for node in element.descendants
            if isinstance(node, NavigableString) and not isinstance(node, Comment)
        )

    @staticmethod
    def next_element_sibling(element: Tag) -> Optional[Tag]:
        """Get the next sibling that is an element (skips text and comments)."""
        sibling = element.next_sibling
        while sibling is not None and not isinstance(sibling, Tag):
            sibling = sibling.next_sibling
        return sibling

    @staticmethod
    def get_attribute(element: Tag, attr: str) -> Optional[str]:
        """
        Get attribute value from element as a string.

        Multi-valued attributes (class, rel, ...) are joined with spaces.
        """
        value = element.get(attr)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def generate_selector(self, element: Tag) -> str:
        """
        Generate a CSS selector for an element.

        Priority:
        1. ID if present and non-empty
        2. Tag + classes + nth-of-type among same-tag siblings

        Args:
            element: Target element

        Returns:
            CSS selector string
        """
        element_id = self.get_attribute(element, "id")
        if element_id:
            return SelectorService.build_selector(element.name, element_id=element_id)

        classes = element.get("class", [])
        if isinstance(classes, str):
            classes = classes.split()

        nth = None
        if element.parent is not None:
            same_tag_siblings = [
                sib for sib in element.parent.children
                if isinstance(sib, Tag) and sib.name == element.name
            ]
            if len(same_tag_siblings) > 1:
                nth = same_tag_siblings.index(element) + 1

        return SelectorService.build_selector(
            element.name, classes=list(classes), nth_of_type=nth
        )

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def serialize(self) -> str:
        """
        Serialize the current tree to HTML.

        Output is deterministic for a given tree: attribute order is
        insertion order and void elements are written without a slash.
        """
        return self._soup.decode(formatter=HTML_FORMATTER)

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    def _drop_doctype_whitespace(self) -> None:
        """Remove whitespace between the doctype and the root (the serializer adds a newline)."""
        for node in list(self._soup.contents):
            if not isinstance(node, Doctype):
                continue
            following = node.next_sibling
            if isinstance(following, NavigableString) and not following.strip():
                following.extract()

    def _ensure_root(self) -> Tag:
        """Return the <html> element, wrapping a bare fragment if needed."""
        root = self._soup.find("html")
        if root is not None:
            return root

        root = self._soup.new_tag("html")
        body = self._soup.new_tag("body")
        for node in list(self._soup.contents):
            if isinstance(node, Doctype):
                continue
            body.append(node.extract())
        root.append(body)
        self._soup.append(root)
        return root

    def _ensure_head(self) -> Tag:
        """Return the <head> element, creating it as the root's first child."""
        head = self._root.find("head")
        if head is not None:
            return head

        head = self._soup.new_tag("head")
        self._root.insert(0, head)
        return head

    def __repr__(self) -> str:
        """String representation."""
        element_count = len(self.get_all_elements())
        return f"DOMDocument({element_count} elements)"
