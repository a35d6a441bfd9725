"""
Error types raised by the harness.

Only ``ConfigurationError`` is fatal to a whole run; everything else is
caught at the day boundary by the runner.
"""

from __future__ import annotations

from typing import Optional


class AocError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(AocError):
    """Raised when the harness is missing required configuration (e.g. SESSION)."""


class NetworkError(AocError):
    """Raised when the puzzle input cannot be downloaded."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SolverNotFoundError(AocError, LookupError):
    """Raised when no solver is registered for a (year, day)."""

    def __init__(self, year: int, day: int) -> None:
        super().__init__(f"No solver registered for {year} day {day}")
        self.year = year
        self.day = day


class SolverExecutionError(AocError):
    """Wraps any exception raised while preparing a solver or running a part."""

    def __init__(self, day: int, stage: str, cause: BaseException) -> None:
        super().__init__(f"Could not execute day {day} ({stage}): {cause}")
        self.day = day
        self.stage = stage
        self.cause = cause


class InputError(AocError):
    """Raised when a cached or sample input file cannot be decoded."""

    def __init__(self, path, cause: BaseException) -> None:
        super().__init__(f"Could not decode {path}: {cause}")
        self.path = path
        self.cause = cause
