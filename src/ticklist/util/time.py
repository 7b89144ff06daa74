import time
from datetime import date

from pyresults import Err, Ok, Result

ISO_DATE_FMT = "%Y-%m-%d"


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def parse_due(s: str | None) -> Result[date | None, str]:
    """Parse a ``YYYY-MM-DD`` calendar date. Empty input means no due date."""
    if s is None or not s.strip():
        return Ok[date | None, str](None)
    try:
        return Ok[date | None, str](date.fromisoformat(s.strip()))
    except ValueError as e:
        return Err[date | None, str](f"Invalid due date: {s!r} ({e!s})")


def format_due(d: date | None) -> str | None:
    if d is None:
        return None
    return d.isoformat()


def format_due_nice(d: date | None) -> str:
    # e.g. "Mar 1"; month names are fixed to keep output locale independent
    if d is None:
        return ""
    months = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    return f"{months[d.month - 1]} {d.day}"
