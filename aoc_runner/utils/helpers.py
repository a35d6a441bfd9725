"""
Helper utilities for the application
"""

import io
import os
from pathlib import Path
from typing import Optional, Union

NS_PER_MS = 1e6

# ANSI escape sequences used by the terminal report
COLORS = {
    "RESET": "\u001b[0m",
    "RED": "\u001b[31m",
    "GREEN": "\u001b[32m",
    "GREY": "\u001b[90m",
    "BOLD": "\u001b[1m",
}
CLEAR_SCREEN = "\u001b[0m\u001b[2J\u001b[H"


def ns_to_ms(nanoseconds: int) -> float:
    """Convert a perf_counter_ns interval to fractional milliseconds"""
    return nanoseconds / NS_PER_MS


def format_ms(milliseconds: Optional[float]) -> str:
    """Format milliseconds the way the report aligns them"""
    if milliseconds is None:
        return f"{'n/a':>12}"
    return f"{milliseconds:12,.2f} ms"


def color(name: str, enabled: bool = True, bold: bool = False) -> str:
    """Return the ANSI prefix for *name*, or '' when colouring is off"""
    if not enabled:
        return ""
    prefix = COLORS[name.upper()]
    return COLORS["BOLD"] + prefix if bold else prefix


def ensure_dir(path: Union[str, Path]):
    """Ensure directory exists"""
    os.makedirs(path, exist_ok=True)


class NullWriter(io.TextIOBase):
    """Text stream that discards everything written to it"""

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        return len(s)
