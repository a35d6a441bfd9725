"""Tests for the per-part answer ledger."""

import pytest

from aoc_runner.core.ledger import ResultLedger, normalize
from aoc_runner.core.runner import DayResult


@pytest.fixture
def ledger(settings):
    return ResultLedger(settings)


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "results" / "2022" / "Day01 Part1.txt"


def read_raw(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


class TestCheckAndRecord:

    def test_first_answer_is_unique_and_recorded(self, ledger, ledger_path):
        assert ledger.check_and_record(ledger_path, "24000") is True
        assert read_raw(ledger_path) == "24000\n"

    def test_same_answer_again_is_repeated(self, ledger, ledger_path):
        ledger.check_and_record(ledger_path, "24000")
        assert ledger.check_and_record(ledger_path, "24000") is False
        assert read_raw(ledger_path) == "24000\n"

    def test_different_answers_are_appended_in_order(self, ledger, ledger_path):
        assert ledger.check_and_record(ledger_path, "1")
        assert ledger.check_and_record(ledger_path, "2")
        assert not ledger.check_and_record(ledger_path, "1")
        assert read_raw(ledger_path) == "1\n2\n"

    @pytest.mark.parametrize("blank", [None, "", "   ", "\n"])
    def test_blank_answer_is_unique_and_never_written(self, ledger, ledger_path, blank):
        assert ledger.check_and_record(ledger_path, blank) is True
        assert ledger.check_and_record(ledger_path, blank) is True
        assert not ledger_path.exists()

    def test_blank_answer_leaves_existing_ledger_alone(self, ledger, ledger_path):
        ledger.check_and_record(ledger_path, "7")
        ledger.check_and_record(ledger_path, "")
        assert read_raw(ledger_path) == "7\n"

    def test_multiline_answer_is_stored_on_one_line(self, ledger, ledger_path):
        assert ledger.check_and_record(ledger_path, "a\nb") is True
        assert read_raw(ledger_path) == "a\rb\n"
        assert ledger.check_and_record(ledger_path, "a\nb") is False
        assert read_raw(ledger_path) == "a\rb\n"

    def test_partial_match_is_not_a_repeat(self, ledger, ledger_path):
        ledger.check_and_record(ledger_path, "123")
        assert ledger.check_and_record(ledger_path, "12") is True

    def test_creates_parent_directories(self, ledger, tmp_path):
        path = tmp_path / "deep" / "er" / "Day03 Part2.txt"
        assert ledger.check_and_record(path, "x")
        assert path.exists()

    def test_append_failure_is_logged_not_raised(self, ledger, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        path = blocker / "Day01 Part1.txt"
        assert ledger.check_and_record(path, "42") is True
        assert "Could not append" in caplog.text


class TestHelpers:

    def test_normalize(self):
        assert normalize("a\nb\nc") == "a\rb\rc"
        assert normalize("plain") == "plain"

    def test_path_for(self, ledger, tmp_path):
        assert ledger.path_for(2022, 7, 2) == tmp_path / "results" / "2022" / "Day07 Part2.txt"

    def test_previous_of_missing_file_is_empty(self, ledger, ledger_path):
        assert ledger.previous(ledger_path) == []

    def test_undecodable_ledger_is_treated_as_empty(self, ledger, ledger_path, caplog):
        ledger_path.parent.mkdir(parents=True)
        ledger_path.write_bytes(b"\xff\n")

        assert ledger.previous(ledger_path) == []
        assert ledger.check_and_record(ledger_path, "42") is True
        assert "Could not read" in caplog.text
        assert ledger_path.read_bytes() == b"\xff\n42\n"

    def test_record_day_sets_flags(self, ledger, tmp_path):
        result = DayResult(3, part1_output="10", part2_output="20")
        ledger.record_day(2022, result)
        assert result.part1_unique and result.part2_unique

        again = DayResult(3, part1_output="10", part2_output="21")
        ledger.record_day(2022, again)
        assert again.part1_unique is False
        assert again.part2_unique is True
        assert read_raw(tmp_path / "results" / "2022" / "Day03 Part2.txt") == "20\n21\n"

    def test_record_day_with_absent_parts_writes_nothing(self, ledger, tmp_path):
        result = DayResult(4)
        ledger.record_day(2022, result)
        assert result.part1_unique and result.part2_unique
        assert not (tmp_path / "results").exists()
