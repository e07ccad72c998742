"""
Orchestrator - Coordinates the fix pipeline.

Components:
- Orchestrator: Runs acquisition, rules, detection, remediation, persistence
- FixPhase, RunMetrics, RunResult: Pipeline contracts
- write_output: Atomic output persistence

Usage:
    from wcag_fixer.orchestrator import Orchestrator

    orchestrator = Orchestrator()
    result = await orchestrator.run("./page.html", "fixed_output.html")
    print(result.describe())
"""

from .contracts import FixPhase, RunMetrics, RunResult
from .orchestrator import Orchestrator
from .output_writer import write_output

__all__ = [
    "FixPhase",
    "RunMetrics",
    "RunResult",
    "Orchestrator",
    "write_output",
]
