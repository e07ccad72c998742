"""
Acquisition - Obtain the HTML a run operates on.

- FileAcquirer: Local path or file:// URL
- HttpAcquirer: Plain GET via httpx
- BrowserAcquirer: Headless Chromium via Playwright

create_acquirer() picks one for a source according to Settings.
"""

from typing import Optional

from ..core.config import Settings, settings as default_settings

from .base import DocumentAcquirer
from .browser import BrowserAcquirer
from .file import FileAcquirer
from .http import HttpAcquirer


URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    """True for http(s) URLs (scheme compared case-insensitively)."""
    return source.strip().lower().startswith(URL_SCHEMES)


def create_acquirer(source: str, settings: Optional[Settings] = None) -> DocumentAcquirer:
    """
    Choose the acquirer for a source.

    Args:
        source: URL or filesystem path
        settings: Settings override (module settings by default)

    Returns:
        BrowserAcquirer or HttpAcquirer for URLs, FileAcquirer otherwise
    """
    settings = settings or default_settings

    if not is_url(source):
        return FileAcquirer()
    if settings.USE_BROWSER:
        return BrowserAcquirer(
            timeout_ms=settings.BROWSER_TIMEOUT_MS,
            wait_until=settings.WAIT_UNTIL,
        )
    return HttpAcquirer(
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        user_agent=settings.USER_AGENT,
    )


__all__ = [
    "DocumentAcquirer",
    "FileAcquirer",
    "HttpAcquirer",
    "BrowserAcquirer",
    "create_acquirer",
    "is_url",
]
