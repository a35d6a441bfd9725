"""
Result Ledger - Remember every answer a part has produced

Each (year, day, part) has a text file with one answer per line.  Answers
containing newlines are stored with the newlines replaced by carriage
returns, so the file must be read and written without newline translation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from .config import Settings, settings as default_settings
from ..utils.helpers import ensure_dir

if TYPE_CHECKING:
    from .runner import DayResult

logger = logging.getLogger(__name__)

NEWLINE_PLACEHOLDER = "\r"


def normalize(text: str) -> str:
    """Collapse *text* to a single ledger line"""
    return text.replace("\n", NEWLINE_PLACEHOLDER)


class ResultLedger:
    """Append-only per-part answer logs used to flag repeated responses"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def path_for(self, year: int, day: int, part: int) -> Path:
        return self.settings.results_path / str(year) / f"Day{day:02d} Part{part}.txt"

    def previous(self, path: Union[str, Path]) -> List[str]:
        """
        Answers already recorded at *path*.

        A missing file has no answers.  A file that exists but cannot be read
        or decoded is logged and also treated as empty, so the next answer is
        reported as unique and appended: the duplicate guard is best-effort.
        """
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return []
        return content.split("\n")

    def check_and_record(self, path: Union[str, Path], text: Optional[str]) -> bool:
        """
        Record *text* at *path* unless it is already there.

        Returns True if there is no text, or if the text does not appear in
        the file yet (in which case it has now been appended).
        """
        if text is None or not text.strip():
            return True

        line = normalize(text)
        unique = line not in self.previous(path)
        if unique:
            self._append(Path(path), line)
        return unique

    def record_day(self, year: int, result: "DayResult") -> None:
        """Record both parts of *result* and store the uniqueness flags on it"""
        result.part1_unique = self.check_and_record(
            self.path_for(year, result.day, 1), result.part1_output
        )
        result.part2_unique = self.check_and_record(
            self.path_for(year, result.day, 2), result.part2_output
        )

    def _append(self, path: Path, line: str) -> None:
        try:
            ensure_dir(path.parent)
            with open(path, "a", encoding="utf-8", newline="") as f:
                f.write(line + "\n")
        except OSError as exc:
            logger.error(f"Could not append to {path}: {exc}")
