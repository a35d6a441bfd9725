"""
Base class for the day solver plugin system.

Every day is described by an `AocDay` subclass that knows:
  - how to prepare/parse the raw puzzle input (in its constructor)
  - how to solve part 1
  - how to solve part 2

The constructor does all the expensive parsing so the runner can time it
separately from the two parts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

from ..utils.helpers import NullWriter


class AocDay(ABC):
    """
    Abstract base class for a single day's solution.

    Subclass this, implement `part1` and `part2`, and add the class to
    ``BUILTIN_SOLVERS`` in ``aoc_runner.solvers.plugins``.
    """

    def __init__(self, input: str, output: Optional[TextIO] = None) -> None:
        """
        Prepare/parse the input in preparation for running the parts.

        Args:
            input: the entire problem input as downloaded
            output: any display/debug output will be sent to output
        """
        self.input = input
        self.out: TextIO = output if output is not None else NullWriter()

    @abstractmethod
    def part1(self) -> str:
        """Solve part 1 of the day's challenge using the prepared input."""
        ...

    @abstractmethod
    def part2(self) -> str:
        """Solve part 2 of the day's challenge using the prepared input."""
        ...


# Anything that builds a solver from (input, output) - usually the class itself
SolverFactory = Callable[[str, Optional[TextIO]], AocDay]
