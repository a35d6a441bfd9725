"""
Advent of Code 2022 Day 7: No Space Left On Device
https://adventofcode.com/2022/day/7

The terminal session is replayed into a file tree stored as a flat list of
nodes.  Nodes refer to their parent and children by index; a child is always
created after its parent, so walking the list backwards visits every child
before its parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO

from ..base import AocDay

SMALL_DIRECTORY_LIMIT = 100_000
DISK_SIZE = 70_000_000
SPACE_NEEDED = 30_000_000

ROOT = 0


@dataclass
class Node:
    name: str
    parent: Optional[int]
    is_dir: bool = True
    size: int = 0
    children: Dict[str, int] = field(default_factory=dict)


class NoSpaceLeftOnDevice(AocDay):

    def __init__(self, input: str, output: Optional[TextIO] = None) -> None:
        super().__init__(input, output)
        self.nodes: List[Node] = [Node("/", None)]
        self._cwd = ROOT
        for line in input.splitlines():
            self._replay(line.strip())
        self.totals = self._directory_totals()

    # ── parsing ─────────────────────────────────────────

    def _replay(self, line: str) -> None:
        if not line:
            return
        if line.startswith("$"):
            parts = line.split()
            if len(parts) >= 3 and parts[1] == "cd":
                self._cd(parts[2])
            return
        kind, name = line.split(maxsplit=1)
        if kind == "dir":
            self._child(self._cwd, name, is_dir=True)
        else:
            self._child(self._cwd, name, is_dir=False, size=int(kind))

    def _cd(self, target: str) -> None:
        if target == "/":
            self._cwd = ROOT
        elif target == "..":
            parent = self.nodes[self._cwd].parent
            self._cwd = ROOT if parent is None else parent
        else:
            self._cwd = self._child(self._cwd, target, is_dir=True)

    def _child(self, parent: int, name: str, is_dir: bool, size: int = 0) -> int:
        existing = self.nodes[parent].children.get(name)
        if existing is not None:
            return existing
        self.nodes.append(Node(name, parent, is_dir=is_dir, size=size))
        index = len(self.nodes) - 1
        self.nodes[parent].children[name] = index
        return index

    def _directory_totals(self) -> Dict[int, int]:
        totals = [node.size for node in self.nodes]
        for index in range(len(self.nodes) - 1, ROOT, -1):
            totals[self.nodes[index].parent] += totals[index]
        return {i: total for i, total in enumerate(totals) if self.nodes[i].is_dir}

    def render(self, index: int = ROOT, depth: int = 0) -> None:
        """Print the tree below *index* to the output sink."""
        node = self.nodes[index]
        if node.is_dir:
            self.out.write(f"{'  ' * depth}- {node.name} (dir, size={self.totals[index]})\n")
            for child in node.children.values():
                self.render(child, depth + 1)
        else:
            self.out.write(f"{'  ' * depth}- {node.name} (file, size={node.size})\n")

    # ── parts ───────────────────────────────────────────

    def part1(self) -> str:
        self.render()
        return str(sum(t for t in self.totals.values() if t <= SMALL_DIRECTORY_LIMIT))

    def part2(self) -> str:
        to_free = SPACE_NEEDED - (DISK_SIZE - self.totals[ROOT])
        return str(min(t for t in self.totals.values() if t >= to_free))
