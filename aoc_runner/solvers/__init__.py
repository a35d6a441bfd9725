"""
Day Solver Plugin System
========================
Static (year, day) -> solver registry.

Usage:
    from aoc_runner.solvers import solver_registry

    solver_registry.load_builtin()
    factory = solver_registry.resolve(2022, 7)
    solution = factory(input_text, None)
    solution.part1()
"""

from .base import AocDay, SolverFactory
from .registry import SolverRegistry, solver_registry

__all__ = [
    "AocDay",
    "SolverFactory",
    "SolverRegistry",
    "solver_registry",
]
