import uuid
from collections.abc import Callable, Iterable

from pyresults import Err, Ok, Result

from ticklist.util.time import now_ms

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
RANDOM_HEX_LENGTH = 12


def to_base36(n: int) -> str:
    if n < 0:
        _msg = f"Negative value cannot be encoded: {n}"
        raise ValueError(_msg)
    if n == 0:
        return "0"
    out: list[str] = []
    while n:
        n, r = divmod(n, 36)
        out.append(_BASE36[r])
    return "".join(reversed(out))


def gen_task_id(clock: Callable[[], int] = now_ms) -> str:
    # time part keeps ids roughly ordered, random part separates same-millisecond calls
    return f"{to_base36(clock())}{uuid.uuid4().hex[:RANDOM_HEX_LENGTH]}"


def parse_id(s: str, *, source_ids: Iterable[str]) -> Result[str, str]:
    """Resolve a full id or a unique id prefix against ``source_ids``."""
    s = s.strip()
    if len(s) == 0:
        return Err("Empty ID")
    ids = list[str](source_ids)
    # full ID search
    candidates = [tid for tid in ids if tid == s]
    # prefix search
    if len(candidates) == 0:
        candidates = [tid for tid in ids if tid.startswith(s)]
    # match only one
    if len(candidates) == 1:
        return Ok(candidates[0])
    # multiple matches
    if len(candidates) > 1:
        _msg = f"Ambiguous ID: {s} (multiple tasks. Please set a longer prefix.)"
        return Err(_msg)
    _msg = f"Unknown ID: {s} (please set correct ID.)"
    return Err(_msg)
