"""
Style Oracle - Effective style resolution for elements.

The focus-visibility detector needs the computed outline of an element,
not its markup. StyleOracle is the capability it consumes. The browser
backed PlaywrightStyleOracle (browser_style_oracle.py) asks Chromium;
CascadeStyleOracle is the offline option and resolves the cascade
statically from the document's <style> elements and inline styles.

Usage:
    from wcag_fixer.analyzers import DOMDocument, CascadeStyleOracle

    document = DOMDocument(html)
    oracle = CascadeStyleOracle(document)
    oracle.outline_style(document.select_one("button"))  # e.g. "none" or None
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import soupsieve
from bs4 import Tag

from .css_parser import (
    CSS_WIDE_KEYWORDS,
    StyleRule,
    expand_declaration,
    parse_declarations,
    parse_stylesheet,
    specificity,
)
from .dom_document import DOMDocument


logger = logging.getLogger(__name__)

# (important, inline, specificity, rule order, declaration index)
CascadeKey = Tuple[bool, bool, Tuple[int, int, int], int, int]


class StyleOracle(ABC):
    """
    Capability: effective style properties of an element.

    Implementations must not mutate the tree.
    """

    @abstractmethod
    def computed_style(self, element: Tag) -> Dict[str, str]:
        """
        Resolve the effective declared properties of an element.

        Args:
            element: Element of the oracle's document

        Returns:
            Mapping of longhand property name to value. Properties no
            stylesheet or inline style sets are absent.
        """
        pass

    async def prepare(self) -> None:
        """Load whatever queries need; called once before the first query."""
        return None

    def outline_style(self, element: Tag) -> Optional[str]:
        """
        Effective outline-style of an element.

        Returns:
            Lower-cased keyword, or None when nothing sets it
        """
        value = self.computed_style(element).get("outline-style")
        if value is None:
            return None

        value = value.lower()
        if value == "inherit":
            parent = element.parent
            if isinstance(parent, Tag) and parent.name != "[document]":
                return self.outline_style(parent)
            return "none"
        if value in CSS_WIDE_KEYWORDS:
            # outline-style is not inherited, so these all yield the initial value
            return "none"
        return value


class CascadeStyleOracle(StyleOracle):
    """
    Static cascade over author styles.

    Considers every <style> element of the document (in source order) and
    each element's style attribute. Precedence: !important over normal,
    inline over stylesheet, then specificity, then source order.

    Not modelled:
    - external stylesheets (<link rel="stylesheet">)
    - rules inside @media / @supports blocks, and <style> elements whose
      media attribute is anything but all or screen
    - user-action states (:focus, :hover, ...); elements are resolved at rest
    """

    STYLESHEET_TYPES = ("", "text/css")

    # Media types of an on-screen rendering
    SCREEN_MEDIA = ("all", "screen")

    def __init__(self, document: DOMDocument):
        """
        Initialize the oracle.

        Stylesheets are read on first query, so an oracle created before
        the rule pass still sees stylesheets inserted by it.

        Args:
            document: Document whose elements will be queried
        """
        self._document = document
        self._rules: Optional[List[StyleRule]] = None
        self._compiled: Dict[str, Optional[soupsieve.SoupSieve]] = {}

    @property
    def rules(self) -> List[StyleRule]:
        """All style rules of the document, in cascade order."""
        if self._rules is None:
            self._rules = self._collect_rules()
        return self._rules

    def computed_style(self, element: Tag) -> Dict[str, str]:
        winners: Dict[str, Tuple[CascadeKey, str]] = {}

        for rule in self.rules:
            matched = [s for s in rule.selectors if self._matches(s, element)]
            if not matched:
                continue
            rule_specificity = max(specificity(s) for s in matched)
            for index, declaration in enumerate(rule.declarations):
                key = (declaration.important, False, rule_specificity, rule.order, index)
                self._offer(winners, key, expand_declaration(declaration))

        inline = element.get("style")
        if inline:
            for index, declaration in enumerate(parse_declarations(inline)):
                key = (declaration.important, True, (0, 0, 0), 0, index)
                self._offer(winners, key, expand_declaration(declaration))

        return {name: value for name, (_, value) in winners.items()}

    def invalidate(self) -> None:
        """Forget collected stylesheets (call after editing <style> elements)."""
        self._rules = None

    @classmethod
    def applies_on_screen(cls, media: Optional[str]) -> bool:
        """
        Whether a <style> media attribute matches a screen rendering.

        A missing or empty attribute means all media. Otherwise one of the
        comma-separated queries must be a bare "all" or "screen" media type,
        optionally prefixed with "only". Queries with features
        ("screen and (min-width: ...)") are not evaluated and never match.
        """
        if media is None or not media.strip():
            return True
        for query in media.lower().split(","):
            words = query.split()
            if words[:1] == ["only"]:
                words = words[1:]
            if len(words) == 1 and words[0] in cls.SCREEN_MEDIA:
                return True
        return False

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    def _collect_rules(self) -> List[StyleRule]:
        rules: List[StyleRule] = []
        for style in self._document.select("style"):
            style_type = (style.get("type") or "").strip().lower()
            if style_type not in self.STYLESHEET_TYPES:
                continue
            if not self.applies_on_screen(style.get("media")):
                logger.debug(f"Skipping <style> for media {style.get('media')!r}")
                continue
            css = self._document.raw_text(style)
            rules.extend(parse_stylesheet(css, start_order=len(rules)))
        logger.debug(f"Collected {len(rules)} style rules")
        return rules

    def _matches(self, selector: str, element: Tag) -> bool:
        if selector not in self._compiled:
            try:
                self._compiled[selector] = soupsieve.compile(selector)
            except soupsieve.SelectorSyntaxError as e:
                logger.debug(f"Ignoring selector {selector!r}: {e}")
                self._compiled[selector] = None

        compiled = self._compiled[selector]
        if compiled is None:
            return False
        return compiled.match(element)

    @staticmethod
    def _offer(
        winners: Dict[str, Tuple[CascadeKey, str]],
        key: CascadeKey,
        properties: Dict[str, str],
    ) -> None:
        """Keep the value with the highest cascade key for each property."""
        for name, value in properties.items():
            current = winners.get(name)
            if current is None or key >= current[0]:
                winners[name] = (key, value)

    def __repr__(self) -> str:
        loaded = "unloaded" if self._rules is None else f"{len(self._rules)} rules"
        return f"CascadeStyleOracle({loaded})"
