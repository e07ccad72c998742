"""
Validators - Read-only checks over the fixed document.

- FocusVisibleDetector: Interactive elements lacking a visible outline
"""

from .focus_visible_detector import FocusVisibleDetector

__all__ = ["FocusVisibleDetector"]
