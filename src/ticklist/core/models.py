from dataclasses import dataclass
from datetime import date
from typing import Any, Literal

from pyresults import Err, Ok, Result

from ticklist.util.time import format_due, parse_due

FilterMode = Literal["all", "pending", "completed"]
SortMode = Literal["created_desc", "created_asc", "due_asc", "due_desc"]

FILTER_MODES: tuple[FilterMode, ...] = ("all", "pending", "completed")
SORT_MODES: tuple[SortMode, ...] = ("created_desc", "created_asc", "due_asc", "due_desc")
DEFAULT_FILTER: FilterMode = "all"
DEFAULT_SORT: SortMode = "created_desc"


@dataclass(frozen=True)
class Task:
    id: str
    text: str
    created_at: int  # epoch milliseconds
    due: date | None = None
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "due": format_due(self.due),
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @staticmethod
    def from_dict(d: Any) -> Result["Task", str]:  # noqa: ANN401
        """Build a Task from a persisted record, rejecting anything malformed."""
        if not isinstance(d, dict):
            return Err(f"Record is not an object: {d!r}")
        tid, text, due, completed, created_at = (
            d.get("id"),
            d.get("text"),
            d.get("due"),
            d.get("completed"),
            d.get("createdAt"),
        )
        if not isinstance(tid, str) or not tid:
            return Err(f"Invalid id: {tid!r}")
        if not isinstance(text, str) or not text.strip():
            return Err(f"Invalid text for {tid}: {text!r}")
        if not isinstance(completed, bool):
            return Err(f"Invalid completed flag for {tid}: {completed!r}")
        # bool is an int subclass
        if not isinstance(created_at, int) or isinstance(created_at, bool):
            return Err(f"Invalid createdAt for {tid}: {created_at!r}")
        if due is not None and not isinstance(due, str):
            return Err(f"Invalid due for {tid}: {due!r}")
        match parse_due(due):
            case Ok(parsed):
                return Ok(Task(id=tid, text=text, created_at=created_at, due=parsed, completed=completed))
            case Err(e):
                return Err(f"{e} in {tid}")
            case _:
                return Err("Unexpected error")
