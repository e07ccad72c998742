"""
SelectorService - CSS selector generation for reporting.

Issues and log lines identify elements by a CSS selector. Class names and
ids may contain characters that must be escaped to form a valid selector.

Usage:
    from ..core.selector import SelectorService

    selector = SelectorService.build_selector("input", classes=["w-1/2"])
    # Returns: "input.w-1\\/2"
"""

from typing import List, Optional


class SelectorService:
    """
    Centralized service for generating valid CSS selectors.

    Handles:
    - Utility classes with colons or slashes (hover:, w-1/2, ...)
    - Arbitrary value classes with brackets ([outline:none])
    - Ids that are not valid identifiers
    """

    # Characters that need escaping in CSS selectors
    # CSS.escape() specification: https://drafts.csswg.org/cssom/#the-css.escape()-method
    SPECIAL_CHARS = frozenset(":[]()/\\@#!$%^&*+={}'\"<>,.~| ")

    @classmethod
    def escape_identifier(cls, value: str) -> str:
        """
        Escape a class name or id for use in a selector.

        Examples:
            "hover:outline" -> "hover\\:outline"
            "[outline:none]" -> "\\[outline\\:none\\]"

        Args:
            value: Raw class name or id

        Returns:
            Escaped identifier safe for CSS selectors
        """
        result = []
        for char in value:
            if char in cls.SPECIAL_CHARS:
                result.append(f"\\{char}")
            else:
                result.append(char)
        escaped = "".join(result)
        # Identifiers may not start with a digit
        if escaped and escaped[0].isdigit():
            escaped = f"\\3{escaped[0]} {escaped[1:]}"
        return escaped

    @classmethod
    def is_safe_identifier(cls, value: str) -> bool:
        """Check if an identifier can be used without escaping."""
        return bool(value) and not value[0].isdigit() and not any(
            c in cls.SPECIAL_CHARS for c in value
        )

    @classmethod
    def build_selector(
        cls,
        tag: str,
        element_id: Optional[str] = None,
        classes: Optional[List[str]] = None,
        nth_of_type: Optional[int] = None,
        max_classes: int = 3,
    ) -> str:
        """
        Build a CSS selector from components.

        Priority order:
        1. ID (if present, returns immediately)
        2. tag + escaped classes + nth-of-type

        Args:
            tag: HTML tag name
            element_id: ID attribute (optional)
            classes: List of class names (optional)
            nth_of_type: Index among same-tag siblings, 1-based (optional)
            max_classes: Maximum number of classes to include

        Returns:
            Valid CSS selector string
        """
        if element_id:
            return f"#{cls.escape_identifier(element_id)}"

        selector = tag.lower()

        if classes:
            escaped = [cls.escape_identifier(c) for c in classes[:max_classes] if c]
            if escaped:
                selector += "." + ".".join(escaped)

        if nth_of_type is not None:
            selector += f":nth-of-type({nth_of_type})"

        return selector
