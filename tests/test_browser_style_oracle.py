"""
Tests for PlaywrightStyleOracle.

Chromium is replaced by the fake renderer from conftest, which parses the
markup it is given and answers the evaluate() call keyed by the index
attribute, like the real script does.
"""

import pytest

from wcag_fixer.analyzers import DOMDocument, PlaywrightStyleOracle
from wcag_fixer.validators import FocusVisibleDetector


PAGE = (
    "<html><head></head><body>"
    '<button class="ring">Ring</button>'
    "<button>Plain</button>"
    '<a href="/x">Link</a>'
    "<div>Static</div>"
    "</body></html>"
)


class TestPrepare:
    """Rendering and reading computed styles."""

    @pytest.mark.asyncio
    async def test_reads_candidate_outlines(self, fake_renderer):
        fake_renderer()
        document = DOMDocument(PAGE)
        oracle = PlaywrightStyleOracle(document)

        await oracle.prepare()

        assert oracle.prepared
        assert oracle.outline_style(document.select_one("button.ring")) == "solid"
        assert oracle.outline_style(document.select("button")[1]) == "none"
        assert oracle.outline_style(document.select_one("a")) == "none"
        assert oracle.computed_style(document.select_one("div")) == {}

    @pytest.mark.asyncio
    async def test_single_render_and_evaluate(self, fake_renderer):
        fake = fake_renderer()
        oracle = PlaywrightStyleOracle(DOMDocument(PAGE), timeout_ms=5000)

        await oracle.prepare()

        assert fake.chromium.launches == 1
        assert fake.page.set_content_calls == [("load", 5000)]
        assert fake.page.evaluate_calls == 1
        assert fake.browser.context_kwargs == {"java_script_enabled": False}
        assert fake.browser.closed

    @pytest.mark.asyncio
    async def test_rendered_markup_indexes_candidates(self, fake_renderer):
        fake = fake_renderer()
        await PlaywrightStyleOracle(DOMDocument(PAGE)).prepare()

        content = fake.page.content
        for index in range(3):
            assert f'{PlaywrightStyleOracle.INDEX_ATTRIBUTE}="{index}"' in content
        assert f'{PlaywrightStyleOracle.INDEX_ATTRIBUTE}="3"' not in content

    @pytest.mark.asyncio
    async def test_tree_left_unchanged(self, fake_renderer):
        fake_renderer()
        document = DOMDocument(PAGE)
        before = document.serialize()

        await PlaywrightStyleOracle(document).prepare()

        assert document.serialize() == before

    @pytest.mark.asyncio
    async def test_candidate_missing_from_render_is_unset(self, fake_renderer):
        fake_renderer(outline_for=lambda el: None if el.name == "a" else "solid")
        document = DOMDocument(PAGE)
        oracle = PlaywrightStyleOracle(document)

        await oracle.prepare()

        assert oracle.outline_style(document.select_one("a")) is None
        assert oracle.outline_style(document.select_one("button")) == "solid"

    @pytest.mark.asyncio
    async def test_render_failure_closes_browser(self, fake_renderer):
        fake = fake_renderer(fail=True)
        oracle = PlaywrightStyleOracle(DOMDocument(PAGE))

        with pytest.raises(RuntimeError, match="Timeout"):
            await oracle.prepare()

        assert fake.browser.closed
        assert not oracle.prepared


class TestQueries:
    """Queries against the computed values."""

    def test_query_before_prepare(self):
        document = DOMDocument(PAGE)
        with pytest.raises(RuntimeError, match="before prepare"):
            PlaywrightStyleOracle(document).outline_style(document.select_one("button"))

    @pytest.mark.asyncio
    async def test_print_stylesheet_does_not_hide_focus_issue(self, fake_renderer):
        # On screen, Chromium ignores the print sheet and computes none
        fake_renderer(outline_for=lambda el: "none")
        document = DOMDocument(
            '<html><head><style media="print">button { outline: 2px solid red }</style></head>'
            "<body><button>Go</button></body></html>"
        )
        oracle = PlaywrightStyleOracle(document)
        await oracle.prepare()

        issues = FocusVisibleDetector().detect(document, oracle)

        assert [issue.outline_style for issue in issues] == ["none"]

    @pytest.mark.asyncio
    async def test_repr(self, fake_renderer):
        fake_renderer()
        oracle = PlaywrightStyleOracle(DOMDocument(PAGE))
        assert repr(oracle) == "PlaywrightStyleOracle(unprepared)"

        await oracle.prepare()

        assert repr(oracle) == "PlaywrightStyleOracle(3 styles)"
