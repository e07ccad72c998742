"""
Core utilities for wcag_fixer.

Configuration, logging setup and selector generation used across the pipeline.
"""

from .config import Settings, settings
from .logger import configure_logging
from .selector import SelectorService

__all__ = ["Settings", "settings", "configure_logging", "SelectorService"]
