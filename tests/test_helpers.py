"""Tests for formatting helpers."""

from aoc_runner.utils.helpers import NullWriter, color, format_ms, ns_to_ms


def test_ns_to_ms():
    assert ns_to_ms(1_500_000) == 1.5
    assert ns_to_ms(1_234) == 0.001234


def test_format_ms_aligns_and_groups():
    assert format_ms(1234.5) == "    1,234.50 ms"
    assert format_ms(None).strip() == "n/a"


def test_color_can_be_disabled():
    assert color("red", enabled=False) == ""
    assert color("red") == "\u001b[31m"
    assert color("grey", bold=True) == "\u001b[1m\u001b[90m"


def test_null_writer_accepts_text():
    assert NullWriter().write("abc") == 3
