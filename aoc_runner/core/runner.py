"""
Runner - Execute day solvers with timing and result recording
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from .config import Settings, settings as default_settings
from .exceptions import (
    AocError,
    ConfigurationError,
    SolverExecutionError,
    SolverNotFoundError,
)
from .inputs import InputProvider
from .ledger import ResultLedger
from .report import ReportRenderer
from ..solvers.base import AocDay
from ..solvers.registry import SolverRegistry, solver_registry
from ..utils.helpers import ns_to_ms

logger = logging.getLogger(__name__)


@dataclass
class DayResult:
    """Result of running a single day. Durations are in milliseconds."""
    day: int
    preparation_ms: Optional[float] = None
    part1_ms: Optional[float] = None
    part2_ms: Optional[float] = None
    part1_output: Optional[str] = None
    part2_output: Optional[str] = None
    part1_unique: bool = True
    part2_unique: bool = True
    error: Optional[str] = None

    @property
    def total_ms(self) -> float:
        return sum(
            t for t in (self.preparation_ms, self.part1_ms, self.part2_ms) if t is not None
        )

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunReport:
    year: int
    days: List[DayResult] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        return sum(result.total_ms for result in self.days)


@dataclass
class RunOptions:
    """How a run behaves; mirrors the command-line flags"""
    one_day_only: bool = False
    sample_input: Optional[str] = None
    display_output: bool = True
    color: bool = True


class Runner:
    """Runs a range of days for one year and reports the results"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[SolverRegistry] = None,
        inputs: Optional[InputProvider] = None,
        ledger: Optional[ResultLedger] = None,
        options: Optional[RunOptions] = None,
        stream: Optional[TextIO] = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ):
        self.settings = settings or default_settings
        if registry is None:
            registry = solver_registry
            registry.load_builtin()
        self.registry = registry
        self.inputs = inputs or InputProvider(self.settings)
        self.ledger = ledger or ResultLedger(self.settings)
        self.options = options or RunOptions()
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock
        self.renderer = ReportRenderer(self.stream, color=self.options.color)

    # ── entry points ────────────────────────────────────

    def run_target(self, year: int, day: int) -> RunReport:
        """Run *day* alone or days 1..*day*, depending on ``one_day_only``"""
        start = day if self.options.one_day_only else 1
        return self.run(year, start, day)

    def run(self, year: int, start_day: int, end_day: int) -> RunReport:
        """
        Run every day in [start_day, end_day].

        A failing day is reported and skipped; only a ConfigurationError
        stops the run.
        """
        report = RunReport(year)
        single = start_day == end_day
        self.renderer.title(year)

        for day in range(start_day, end_day + 1):
            self.renderer.day_header(day)
            sample = self.options.sample_input if single else None

            result = self.run_day(year, day, sample=sample)
            self.ledger.record_day(year, result)
            self.renderer.day(result)

            report.days.append(result)

        self.renderer.total(report.total_ms)
        return report

    def run_day(self, year: int, day: int, sample: Optional[str] = None) -> DayResult:
        """Prepare and run both parts of *day*; failures end up on the result"""
        result = DayResult(day)
        try:
            factory = self.registry.resolve(year, day)
            if sample:
                text = self.inputs.get_sample_input(year, sample)
            else:
                text = self.inputs.get_input(year, day)
            self._execute(day, factory, text, result)
        except ConfigurationError:
            raise
        except SolverExecutionError as exc:
            logger.error(str(exc), exc_info=exc.cause)
            result.error = str(exc)
        except SolverNotFoundError as exc:
            known = ", ".join(str(d) for d in self.registry.days(year)) or "none"
            logger.warning("%s (registered days for %s: %s)", exc, year, known)
            result.error = str(exc)
        except (AocError, OSError) as exc:
            logger.error("Could not execute day %s. %s", day, exc)
            body = getattr(exc, "body", "")
            if body:
                logger.error(body.strip())
            result.error = str(exc)
        return result

    # ── timing ──────────────────────────────────────────

    def _execute(self, day: int, factory, text: str, result: DayResult) -> None:
        sink = self.stream if self.options.display_output else None

        # Allow the solution to preprocess the input data
        solution: AocDay = self._timed(day, "prepare", lambda: factory(text, sink), result, "preparation_ms")
        result.part1_output = _as_text(self._timed(day, "part 1", solution.part1, result, "part1_ms"))
        result.part2_output = _as_text(self._timed(day, "part 2", solution.part2, result, "part2_ms"))

    def _timed(self, day: int, stage: str, action, result: DayResult, attribute: str):
        start = self.clock()
        try:
            value = action()
        except Exception as exc:
            raise SolverExecutionError(day, stage, exc) from exc
        setattr(result, attribute, ns_to_ms(self.clock() - start))
        return value


def _as_text(value) -> Optional[str]:
    return None if value is None else str(value)
