"""
Terminal report for a run
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TextIO

from ..utils.helpers import CLEAR_SCREEN, color, format_ms

if TYPE_CHECKING:
    from .runner import DayResult

REPEATED = "REPEATED RESPONSE"
ABSENT = "(absent)"


class ReportRenderer:
    """Writes the coloured per-day report to a text stream"""

    def __init__(self, stream: TextIO, color: bool = True):
        self.stream = stream
        self.color = color

    def _c(self, name: str, bold: bool = False) -> str:
        return color(name, self.color, bold)

    def _print(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def title(self, year: int) -> None:
        prefix = CLEAR_SCREEN if self.color else ""
        self._print(f"{prefix}Advent of Code {year}")

    def day_header(self, day: int) -> None:
        self._print((self._c("RED") + "*" + self._c("GREEN") + "*") * 30)
        self._print(f"{self._c('RESET')}Day {day}:")

    def part(self, number: int, output: Optional[str], unique: bool) -> str:
        shown = ABSENT if output is None else output
        marker = "" if unique else REPEATED
        name = "RED" if number == 1 else "GREEN"
        return f"{self._c(name)}Part {number}: > {shown} < {marker}".rstrip()

    def day(self, result: "DayResult") -> None:
        self._print(self.part(1, result.part1_output, result.part1_unique))
        self._print(self.part(2, result.part2_output, result.part2_unique))
        self._print(f"{self._c('GREY')}--- Prep:   {format_ms(result.preparation_ms)}")
        self._print(f"{self._c('RED')}--- Part 1: {format_ms(result.part1_ms)}")
        self._print(f"{self._c('GREEN')}--- Part 2: {format_ms(result.part2_ms)}")

    def total(self, total_ms: float) -> None:
        self._print(f"{self._c('GREY', bold=True)}Total runtime: {format_ms(total_ms)}{self._c('RESET')}")
