"""
Tests for the command line entry point.
"""

import argparse
import logging

import pytest

from wcag_fixer.cli import build_parser, main, settings_from_args
from wcag_fixer.core.config import Settings
from wcag_fixer.core.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() installs a stdout handler; drop it after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestMain:
    """Tests for main()."""

    def test_success(self, tmp_path, capsys, minimal_html):
        source = tmp_path / "page.html"
        source.write_text(minimal_html, encoding="utf-8")
        output = tmp_path / "fixed.html"

        code = main([str(source), "-o", str(output), "--no-browser", "--log-level", "WARNING"])

        assert code == 0
        assert output.exists()
        assert f'✅ The fixed HTML has been saved to "{output}"' in capsys.readouterr().out

    def test_failure(self, tmp_path, capsys):
        output = tmp_path / "fixed.html"

        code = main([str(tmp_path / "missing.html"), "-o", str(output), "--log-level", "ERROR"])

        assert code == 1
        assert not output.exists()
        captured = capsys.readouterr()
        assert "❌ Error processing the website:" in captured.err
        assert "❌" not in captured.out

    def test_language_option(self, tmp_path, minimal_html):
        source = tmp_path / "page.html"
        source.write_text(minimal_html, encoding="utf-8")
        output = tmp_path / "fixed.html"

        main([str(source), "-o", str(output), "--no-browser", "--lang", "fr", "--log-level", "ERROR"])

        assert output.read_text(encoding="utf-8").startswith('<html lang="fr">')


class TestArguments:
    """Tests for argument parsing and settings overlay."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.source is None
        assert args.output is None
        assert args.no_browser is False

    def test_overlay(self):
        base = Settings(_env_file=None)
        args = build_parser().parse_args(
            ["https://example.com", "-o", "out.html", "--lang", "es", "--no-browser", "--log-level", "DEBUG"]
        )
        settings = settings_from_args(args, base)

        assert settings.SOURCE == "https://example.com"
        assert settings.OUTPUT_PATH == "out.html"
        assert settings.DEFAULT_LANGUAGE == "es"
        assert settings.USE_BROWSER is False
        assert settings.LOG_LEVEL == "DEBUG"
        # Base settings are not modified
        assert base.USE_BROWSER is True

    def test_no_options_keeps_base(self):
        base = Settings(_env_file=None, SOURCE="a.html")
        settings = settings_from_args(argparse.Namespace(
            source=None, output=None, lang=None, no_browser=False, log_level=None,
        ), base)
        assert settings == base
