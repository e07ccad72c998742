"""
Orchestrator - Main coordinator for the accessibility fix pipeline.

Runs one document through:
1. Acquisition (file, HTTP or headless browser)
2. Parsing into a DOMDocument
3. Deterministic rules (RuleEngine), in priority order
4. Focus visibility detection on the post-rule tree, with computed styles
   from headless Chromium (USE_BROWSER) or the static cascade
5. Remediation of flagged elements
6. Serialization and atomic persistence

The orchestrator is the error boundary of a run: every failure is logged
and returned as a failed RunResult; nothing is written on failure.
"""

import asyncio
import logging
import time
from typing import Callable, Dict, List, Optional

from ..acquisition import DocumentAcquirer, create_acquirer
from ..analyzers.dom_document import DOMDocument
from ..analyzers.browser_style_oracle import PlaywrightStyleOracle
from ..analyzers.style_oracle import CascadeStyleOracle, StyleOracle
from ..contracts.errors import AcquisitionError, FailureKind, FixerError, RuleError
from ..core.config import Settings, settings as default_settings
from ..fixers.deterministic.rule_engine import RuleEngine, create_default_engine
from ..fixers.focus_remediator import FocusVisibleRemediator
from ..validators.focus_visible_detector import FocusVisibleDetector

from .contracts import FixPhase, RunResult
from .output_writer import write_output


logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Main orchestrator for the fix pipeline.

    Every run gets its own DOMDocument; components are shared between
    runs and hold no per-document state.

    Usage:
        orchestrator = Orchestrator()
        result = await orchestrator.run("https://example.com")

        if result.success:
            print(f"Saved to {result.output_path}")
        else:
            print(f"{result.failure_kind.value}: {result.error_message}")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        # Components (use defaults if not provided)
        acquirer: Optional[DocumentAcquirer] = None,
        rule_engine: Optional[RuleEngine] = None,
        detector: Optional[FocusVisibleDetector] = None,
        remediator: Optional[FocusVisibleRemediator] = None,
        oracle_factory: Optional[Callable[[DOMDocument], StyleOracle]] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            settings: Settings override (module settings by default)
            acquirer: Acquirer used for every source (chosen per source if None)
            rule_engine: RuleEngine instance
            detector: FocusVisibleDetector instance
            remediator: FocusVisibleRemediator instance
            oracle_factory: Builds the style oracle for a run's document
                (PlaywrightStyleOracle if settings.USE_BROWSER, else
                CascadeStyleOracle)
        """
        self._settings = settings or default_settings
        self._acquirer = acquirer
        self._rule_engine = rule_engine
        self._detector = detector or FocusVisibleDetector()
        self._remediator = remediator
        self._oracle_factory = oracle_factory

    @property
    def settings(self) -> Settings:
        return self._settings

    def _get_rule_engine(self) -> RuleEngine:
        """Get or create rule engine."""
        if self._rule_engine is None:
            self._rule_engine = create_default_engine(self._settings)
        return self._rule_engine

    def _get_remediator(self) -> FocusVisibleRemediator:
        """Get or create remediator."""
        if self._remediator is None:
            self._remediator = FocusVisibleRemediator(color=self._settings.FOCUS_MARKER_COLOR)
        return self._remediator

    def _get_acquirer(self, source: str) -> DocumentAcquirer:
        if self._acquirer is not None:
            return self._acquirer
        return create_acquirer(source, self._settings)

    def _get_oracle(self, document: DOMDocument, offline: bool = False) -> StyleOracle:
        """Build the style oracle for one document."""
        if self._oracle_factory is not None:
            return self._oracle_factory(document)
        if self._settings.USE_BROWSER and not offline:
            return PlaywrightStyleOracle(
                document,
                timeout_ms=self._settings.BROWSER_TIMEOUT_MS,
            )
        return CascadeStyleOracle(document)

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    async def run(
        self,
        source: Optional[str] = None,
        output_path: Optional[str] = None,
    ) -> RunResult:
        """
        Execute the full pipeline for one source.

        Args:
            source: URL or path (settings.SOURCE if None)
            output_path: Output file (settings.OUTPUT_PATH if None)

        Returns:
            RunResult; failures are reported, never raised
        """
        source = source if source is not None else self._settings.SOURCE
        output_path = output_path if output_path is not None else self._settings.OUTPUT_PATH

        start_time = time.time()
        result = RunResult(success=False, source=source)
        logger.info(f"Processing {source}")

        try:
            acquire_start = time.time()
            html = await self._get_acquirer(source).acquire(source)
            result.metrics.acquisition_time_ms = (time.time() - acquire_start) * 1000
            result.phases_completed.append(FixPhase.ACQUIRE)

            document = self._parse_and_mutate(html, source, result)
            oracle = self._get_oracle(document)
            await self._prepare_oracle(oracle, result)
            self._detect_and_remediate(document, oracle, result)

            written = await asyncio.to_thread(write_output, output_path, result.fixed_html)
            result.output_path = str(written)
            result.phases_completed.append(FixPhase.PERSIST)

            result.phases_completed.append(FixPhase.COMPLETE)
            result.success = True

        except FixerError as e:
            logger.error(f"Run failed during {self._failed_phase(result)}: {e}")
            self._fail(result, e.kind, str(e))

        except Exception as e:
            logger.exception(f"Run failed: {e}")
            self._fail(result, FailureKind.RULE, str(e))

        result.metrics.total_duration_ms = (time.time() - start_time) * 1000
        logger.info(result.describe())
        return result

    def fix_html(self, html: str) -> RunResult:
        """
        Run the in-memory part of the pipeline (parse to serialize).

        Nothing is acquired or written; result.fixed_html holds the output.
        Styles are resolved offline with CascadeStyleOracle unless an
        oracle_factory was given.

        Args:
            html: Document to fix

        Returns:
            RunResult; failures are reported, never raised
        """
        start_time = time.time()
        result = RunResult(success=False)

        try:
            document = self._parse_and_mutate(html, None, result)
            oracle = self._get_oracle(document, offline=True)
            self._detect_and_remediate(document, oracle, result)
            result.phases_completed.append(FixPhase.COMPLETE)
            result.success = True

        except FixerError as e:
            logger.error(f"Fix failed during {self._failed_phase(result, FixPhase.PARSE)}: {e}")
            self._fail(result, e.kind, str(e))

        except Exception as e:
            logger.exception(f"Fix failed: {e}")
            self._fail(result, FailureKind.RULE, str(e))

        result.metrics.total_duration_ms = (time.time() - start_time) * 1000
        return result

    async def run_many(self, jobs: Dict[str, str]) -> List[RunResult]:
        """
        Run several independent documents concurrently.

        Args:
            jobs: Mapping of source to output path

        Returns:
            One RunResult per job, in mapping order
        """
        logger.info(f"Processing {len(jobs)} sources")
        return list(await asyncio.gather(
            *(self.run(source, output_path) for source, output_path in jobs.items())
        ))

    # =========================================================================
    # PIPELINE
    # =========================================================================

    def _parse_and_mutate(self, html: str, source: Optional[str], result: RunResult) -> DOMDocument:
        """Parse the document and run the rule engine over it."""
        metrics = result.metrics

        try:
            document = DOMDocument(html, source=source)
        except Exception as e:
            raise AcquisitionError("Cannot parse document", source=source, cause=e) from e
        result.phases_completed.append(FixPhase.PARSE)
        logger.debug(f"Parsed {document!r}")

        rules_start = time.time()
        result.rule_outcomes = self._get_rule_engine().apply_all(document)
        metrics.rules_time_ms = (time.time() - rules_start) * 1000
        metrics.rules_changed = sum(o.changed for o in result.rule_outcomes)
        result.phases_completed.append(FixPhase.MUTATE)
        return document

    async def _prepare_oracle(self, oracle: StyleOracle, result: RunResult) -> None:
        """Let the oracle load computed styles (counted as detection time)."""
        name = oracle.__class__.__name__
        prepare_start = time.time()
        try:
            await oracle.prepare()
        except FixerError:
            raise
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            raise RuleError(f"{name} failed", rule_name=name, cause=e) from e
        result.metrics.detection_time_ms += (time.time() - prepare_start) * 1000

    def _detect_and_remediate(
        self, document: DOMDocument, oracle: StyleOracle, result: RunResult
    ) -> None:
        """Detect and remediate focus issues, then serialize into result."""
        metrics = result.metrics

        detect_start = time.time()
        issues = self._guarded(
            "FocusVisibleDetector", self._detector.detect, document, oracle
        )
        result.issues = [issue.to_dict() for issue in issues]
        metrics.issues_found = len(issues)
        result.phases_completed.append(FixPhase.DETECT)

        remediator = self._get_remediator()
        outcome = self._guarded(remediator.name, remediator.apply, issues)
        metrics.elements_remediated = outcome.changed
        metrics.detection_time_ms += (time.time() - detect_start) * 1000
        result.phases_completed.append(FixPhase.REMEDIATE)

        result.fixed_html = document.serialize()
        result.phases_completed.append(FixPhase.SERIALIZE)

    @staticmethod
    def _guarded(name: str, func, *args):
        """Call a pipeline component, wrapping unexpected errors in RuleError."""
        try:
            return func(*args)
        except FixerError:
            raise
        except Exception as e:
            raise RuleError(f"{name} failed", rule_name=name, cause=e) from e

    @staticmethod
    def _fail(result: RunResult, kind: FailureKind, message: str) -> None:
        result.success = False
        result.failure_kind = kind
        result.error_message = message
        result.output_path = None

    @staticmethod
    def _failed_phase(result: RunResult, first: FixPhase = FixPhase.ACQUIRE) -> str:
        """Name of the phase after the last completed one."""
        phases = list(FixPhase)
        if not result.phases_completed:
            return first.value
        index = phases.index(result.phases_completed[-1]) + 1
        return phases[min(index, len(phases) - 1)].value

    def __repr__(self) -> str:
        acquirer = self._acquirer.__class__.__name__ if self._acquirer else "auto"
        return f"Orchestrator(acquirer={acquirer}, output={self._settings.OUTPUT_PATH!r})"
