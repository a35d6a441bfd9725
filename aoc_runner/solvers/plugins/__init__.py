"""
Built-in day solvers.

To add a day, create a module in this package with an ``AocDay`` subclass
and add it to ``BUILTIN_SOLVERS`` below.
"""

from typing import Dict, Tuple

from ..base import SolverFactory
from .y2022_day01 import CalorieCounting
from .y2022_day07 import NoSpaceLeftOnDevice

BUILTIN_SOLVERS: Dict[Tuple[int, int], SolverFactory] = {
    (2022, 1): CalorieCounting,
    (2022, 7): NoSpaceLeftOnDevice,
}
