"""
Command line entry point.

    wcag-fixer [SOURCE] [-o OUTPUT] [--lang CODE] [--no-browser] [--log-level LEVEL]

Fixes one document and reports the outcome (success on stdout, failure on
stderr). Exit status is 0 when the fixed file was written and 1 otherwise.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from .core.config import Settings, settings as default_settings
from .core.logger import configure_logging
from .orchestrator import Orchestrator, RunResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wcag-fixer",
        description="Apply automatic WCAG fixes to an HTML page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wcag-fixer                               Fix the default source
  wcag-fixer page.html -o page.fixed.html  Fix a local file
  wcag-fixer https://example.com --lang fr Render and fix a live page
        """,
    )
    parser.add_argument("source", nargs="?", help="URL or file path (default: settings SOURCE)")
    parser.add_argument("-o", "--output", help="Output file (default: settings OUTPUT_PATH)")
    parser.add_argument("--lang", help="Language code for documents without one")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Work offline: plain HTTP GET for URLs, static style resolution",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Overlay command line options onto the configured settings."""
    base = base or default_settings
    update = {}
    if args.source:
        update["SOURCE"] = args.source
    if args.output:
        update["OUTPUT_PATH"] = args.output
    if args.lang:
        update["DEFAULT_LANGUAGE"] = args.lang
    if args.no_browser:
        update["USE_BROWSER"] = False
    if args.log_level:
        update["LOG_LEVEL"] = args.log_level
    return base.model_copy(update=update)


def report(result: RunResult) -> None:
    """Print the one-line outcome of a run."""
    if result.success:
        print(f'✅ The fixed HTML has been saved to "{result.output_path}"')
    else:
        print(f"❌ Error processing the website: {result.error_message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    configure_logging(settings.LOG_LEVEL)

    orchestrator = Orchestrator(settings=settings)
    result = asyncio.run(orchestrator.run(settings.SOURCE, settings.OUTPUT_PATH))
    report(result)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
