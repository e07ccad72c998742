"""
Pytest configuration and shared fixtures for wcag_fixer tests.

Provides:
- Sample HTML documents
- Settings isolated from the environment and .env files
- A stub acquirer for orchestrator tests
- A fake Playwright renderer for the browser style oracle
"""

import pytest
from bs4 import BeautifulSoup

from wcag_fixer.acquisition import DocumentAcquirer
from wcag_fixer.analyzers import DOMDocument
from wcag_fixer.contracts import AcquisitionError
from wcag_fixer.core.config import Settings


# ---------------------------------------------------------------------------
# SAMPLE DOCUMENTS
# ---------------------------------------------------------------------------

MINIMAL_HTML = "<html><head></head><body><button>Go</button></body></html>"

FORM_HTML = """<!DOCTYPE html>
<html>
<head>
<meta name="viewport" content="width=device-width, user-scalable=no">
<title>Signup</title>
</head>
<body>
<div id="main" orientation="landscape">
  <form>
    <label for="email">Email *</label>
    <input id="email" type="email">
    <label for="nick">Nickname</label>
    <input id="nick" type="text" autocomplete="nickname">
  </form>
  <div role="timer">10</div>
  <a href="/terms" target="_blank">Terms</a>
  <span id="">empty</span>
</div>
</body>
</html>
"""


class FakeRenderPage:
    """Page that "renders" markup by parsing it with BeautifulSoup."""

    def __init__(self, outline_for, fail):
        self.outline_for = outline_for
        self.fail = fail
        self.content = None
        self.set_content_calls = []
        self.evaluate_calls = 0

    async def set_content(self, html, wait_until=None, timeout=None):
        self.set_content_calls.append((wait_until, timeout))
        self.content = html
        if self.fail:
            raise RuntimeError("Timeout 30000ms exceeded")

    async def evaluate(self, expression, arg=None):
        self.evaluate_calls += 1
        soup = BeautifulSoup(self.content, "html.parser")
        styles = {}
        for element in soup.select(f"[{arg}]"):
            value = self.outline_for(element)
            if value is not None:
                styles[element[arg]] = value
        return styles


class FakeRenderContext:
    def __init__(self, page):
        self.page = page

    async def new_page(self):
        return self.page


class FakeRenderBrowser:
    def __init__(self, page):
        self.page = page
        self.context_kwargs = None
        self.closed = False

    async def new_context(self, **kwargs):
        self.context_kwargs = kwargs
        return FakeRenderContext(self.page)

    async def close(self):
        self.closed = True


class FakeRenderChromium:
    def __init__(self, browser):
        self.browser = browser
        self.launches = 0

    async def launch(self, **kwargs):
        self.launches += 1
        return self.browser


def ring_outline(element):
    """Computed outline-style: solid for class "ring", none otherwise."""
    return "solid" if "ring" in element.get("class", []) else "none"


class FakeRenderPlaywright:
    """Stands in for async_playwright() when styles are computed."""

    def __init__(self, outline_for=ring_outline, fail=False):
        self.page = FakeRenderPage(outline_for, fail)
        self.browser = FakeRenderBrowser(self.page)
        self.chromium = FakeRenderChromium(self.browser)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class StubAcquirer(DocumentAcquirer):
    """Returns fixed HTML, or raises when html is None."""

    def __init__(self, html=None):
        self.html = html
        self.sources = []

    async def acquire(self, source: str) -> str:
        self.sources.append(source)
        if self.html is None:
            raise AcquisitionError(f"Cannot read {source}", source=source)
        return self.html


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def minimal_html():
    """Smallest document with one focus candidate."""
    return MINIMAL_HTML


@pytest.fixture
def form_html():
    """Document that triggers most rules."""
    return FORM_HTML


@pytest.fixture
def make_document():
    """Factory building a DOMDocument from markup."""
    def _make(html: str) -> DOMDocument:
        return DOMDocument(html)
    return _make


@pytest.fixture
def test_settings(tmp_path):
    """Settings that ignore .env and write into a temporary directory."""
    return Settings(
        _env_file=None,
        SOURCE=str(tmp_path / "page.html"),
        OUTPUT_PATH=str(tmp_path / "fixed_output.html"),
        USE_BROWSER=False,
    )


@pytest.fixture
def stub_acquirer():
    """Factory for StubAcquirer."""
    return StubAcquirer


@pytest.fixture
def fake_renderer(monkeypatch):
    """Patch playwright.async_api.async_playwright with FakeRenderPlaywright."""
    def _install(**kwargs):
        fake = FakeRenderPlaywright(**kwargs)
        monkeypatch.setattr("playwright.async_api.async_playwright", lambda: fake)
        return fake
    return _install
