"""
AoC Runner
==========
Harness for running Advent of Code solutions: input download and caching,
timed execution of each day's solver and a ledger of previously seen answers.
"""

__version__ = "1.0.0"
