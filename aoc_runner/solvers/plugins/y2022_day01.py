"""
Advent of Code 2022 Day 1: Calorie Counting
https://adventofcode.com/2022/day/1
"""

from __future__ import annotations

from typing import List, Optional, TextIO

from ..base import AocDay


class CalorieCounting(AocDay):

    def __init__(self, input: str, output: Optional[TextIO] = None) -> None:
        super().__init__(input, output)
        # Totals per elf, largest first
        self.totals: List[int] = sorted(
            (
                sum(int(line) for line in block.split("\n") if line.strip())
                for block in input.strip().split("\n\n")
                if block.strip()
            ),
            reverse=True,
        )

    def part1(self) -> str:
        return str(self.totals[0]) if self.totals else ""

    def part2(self) -> str:
        return str(sum(self.totals[:3]))
