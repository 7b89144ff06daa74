import time
import unittest
from datetime import date

from ticklist.util.time import format_due, format_due_nice, now_ms, parse_due


class TestNowMs(unittest.TestCase):
    def test_is_epoch_milliseconds(self) -> None:
        before = int(time.time() * 1000)
        out = now_ms()
        after = int(time.time() * 1000)
        assert before - 1 <= out <= after + 1


class TestParseDue(unittest.TestCase):
    def test_none_and_blank(self) -> None:
        assert parse_due(None).unwrap() is None
        assert parse_due("  ").unwrap() is None

    def test_iso_date(self) -> None:
        assert parse_due("2024-03-01").unwrap() == date(2024, 3, 1)

    def test_invalid(self) -> None:
        r = parse_due("03/01/2024")
        assert r.is_err()
        assert "Invalid due date" in r.unwrap_err()


class TestFormatDue(unittest.TestCase):
    def test_iso(self) -> None:
        assert format_due(date(2024, 1, 5)) == "2024-01-05"
        assert format_due(None) is None

    def test_nice(self) -> None:
        assert format_due_nice(date(2024, 3, 1)) == "Mar 1"
        assert format_due_nice(date(2024, 12, 25)) == "Dec 25"
        assert format_due_nice(None) == ""


if __name__ == "__main__":
    unittest.main()
