"""Pytest configuration and shared fixtures."""

import itertools
from pathlib import Path

import httpx
import pytest

from aoc_runner.core.config import Settings
from aoc_runner.solvers.base import AocDay
from aoc_runner.solvers.registry import SolverRegistry


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary directory, with no session cookie."""
    return Settings(_env_file=None, BASE_PATH=str(tmp_path), SESSION=None)


@pytest.fixture
def session_settings(tmp_path):
    """Settings with a session cookie configured."""
    return Settings(_env_file=None, BASE_PATH=str(tmp_path), SESSION="abc123")


@pytest.fixture
def write_input(tmp_path):
    """Write a cached input file for (year, day)."""
    def _write(year: int, day: int, text: str) -> Path:
        path = tmp_path / "input" / str(year) / f"day{day:02d}.txt"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def fake_clock():
    """perf_counter_ns replacement: every interval is exactly 1 ms."""
    counter = itertools.count(step=1_000_000)
    return lambda: next(counter)


class RecordingTransport:
    """Wraps a handler and keeps every request it sees."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self), follow_redirects=True)


@pytest.fixture
def transport_factory():
    return RecordingTransport


class EchoDay(AocDay):
    """Returns the first line for part 1 and the line count for part 2."""

    def __init__(self, input, output=None):
        super().__init__(input, output)
        self.lines = input.splitlines()
        self.out.write("echo prepared\n")

    def part1(self):
        return self.lines[0] if self.lines else ""

    def part2(self):
        return str(len(self.lines))


class BrokenPart1Day(EchoDay):

    def part1(self):
        raise ValueError("part 1 exploded")


class BrokenPrepareDay(AocDay):

    def __init__(self, input, output=None):
        super().__init__(input, output)
        raise RuntimeError("cannot parse")

    def part1(self):
        return "unreachable"

    def part2(self):
        return "unreachable"


@pytest.fixture
def registry():
    """Empty registry, independent from the global one."""
    return SolverRegistry()
