"""
Analyzers - Document model and read-only analysis tools.

This module provides:
- DOMDocument: Parsed, mutable document with root/head handles
- StyleOracle: Effective style resolution, with two implementations
  - PlaywrightStyleOracle: computed style from headless Chromium
  - CascadeStyleOracle: static cascade, works offline
- InteractiveDetector: Focus candidate selection
- css_parser: Stylesheet and inline style helpers

Usage:
    from wcag_fixer.analyzers import (
        DOMDocument,
        PlaywrightStyleOracle,
        InteractiveDetector,
    )

    document = DOMDocument("<html>...</html>")
    oracle = PlaywrightStyleOracle(document)
    await oracle.prepare()
    for element in InteractiveDetector().find_focusable_elements(document):
        print(element.name, oracle.outline_style(element))
"""

from .dom_document import DOMDocument
from .style_oracle import StyleOracle, CascadeStyleOracle
from .browser_style_oracle import PlaywrightStyleOracle
from .interactive_detector import InteractiveDetector

__all__ = [
    "DOMDocument",
    "StyleOracle",
    "CascadeStyleOracle",
    "PlaywrightStyleOracle",
    "InteractiveDetector",
]
