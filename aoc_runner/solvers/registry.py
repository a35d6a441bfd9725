"""
Solver Registry - central catalogue of day solvers.

Maps ``(year, day)`` to a solver factory.  The built-in table lives in
``aoc_runner.solvers.plugins``; nothing is discovered by scanning modules or
by building class names at runtime.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .base import SolverFactory
from ..core.exceptions import SolverNotFoundError

logger = logging.getLogger(__name__)


class SolverRegistry:
    """Registry of solver factories keyed by (year, day)."""

    def __init__(self) -> None:
        self._factories: Dict[Tuple[int, int], SolverFactory] = {}
        self._loaded = False

    # ── registration ────────────────────────────────────

    def load_builtin(self) -> None:
        """Register every solver in the built-in table (once)."""
        if self._loaded:
            return
        from .plugins import BUILTIN_SOLVERS

        for (year, day), factory in BUILTIN_SOLVERS.items():
            self.register(year, day, factory)
        self._loaded = True
        logger.debug("Solver registry loaded %d solvers", len(self._factories))

    def register(self, year: int, day: int, factory: SolverFactory) -> None:
        """Register a factory for *year*/*day* (idempotent for the same factory)."""
        key = (year, day)
        existing = self._factories.get(key)
        if existing is factory:
            logger.debug("Solver for %s day %s already registered, skipping", year, day)
            return
        if existing is not None:
            raise ValueError(f"A different solver is already registered for {year} day {day}")
        self._factories[key] = factory
        logger.debug("Registered solver for %s day %s: %s", year, day,
                     getattr(factory, "__name__", repr(factory)))

    # ── queries ─────────────────────────────────────────

    def resolve(self, year: int, day: int) -> SolverFactory:
        factory = self._factories.get((year, day))
        if factory is None:
            raise SolverNotFoundError(year, day)
        return factory

    def is_registered(self, year: int, day: int) -> bool:
        return (year, day) in self._factories

    def days(self, year: int) -> List[int]:
        return sorted(d for (y, d) in self._factories if y == year)


# ─── Global singleton ──────────────────────────────────
solver_registry = SolverRegistry()
