from collections.abc import Iterable

from ticklist.core.models import DEFAULT_SORT, SORT_MODES, SortMode, Task


def created_key(t: Task) -> int:
    return t.created_at


def due_asc_key(t: Task) -> tuple[bool, int]:
    # undated tasks go after every dated one
    return (t.due is None, t.due.toordinal() if t.due is not None else 0)


def due_desc_key(t: Task) -> tuple[bool, int]:
    # negated ordinal, not reverse=True: undated tasks must stay last
    return (t.due is None, -t.due.toordinal() if t.due is not None else 0)


def sort_tasks(tasks: Iterable[Task], mode: SortMode = DEFAULT_SORT) -> list[Task]:
    """Return a new list ordered by ``mode``.

    Python's sort is stable, so tasks with equal keys keep their insertion order.
    Unknown modes sort as ``created_desc``.
    """
    if mode not in SORT_MODES:
        mode = DEFAULT_SORT
    items = list[Task](tasks)
    match mode:
        case "created_asc":
            return sorted(items, key=created_key)
        case "due_asc":
            return sorted(items, key=due_asc_key)
        case "due_desc":
            return sorted(items, key=due_desc_key)
        case _:
            return sorted(items, key=lambda t: -created_key(t))
