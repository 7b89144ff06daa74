from collections.abc import Iterable
from dataclasses import dataclass

from ticklist.core.models import (
    DEFAULT_FILTER,
    DEFAULT_SORT,
    FILTER_MODES,
    SORT_MODES,
    FilterMode,
    SortMode,
    Task,
)
from ticklist.core.sort import sort_tasks
from ticklist.util.logger import setup_logger

logger = setup_logger("ticklist")

EMPTY_MESSAGE = "No tasks - add something to get started"


@dataclass(frozen=True)
class Stats:
    total: int = 0
    completed: int = 0
    pending: int = 0
    progress: int = 0  # percent, 0..100


@dataclass(frozen=True)
class Projection:
    """What the presentation layer renders.

    ``is_empty`` is set when nothing survives the filter, so a placeholder can be
    shown instead of an empty list.
    """

    display: tuple[Task, ...]
    stats: Stats
    is_empty: bool
    filter: FilterMode = DEFAULT_FILTER
    sort: SortMode = DEFAULT_SORT


def progress_percent(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    # round half up in integers: floor(completed * 100 / total + 1/2)
    return (completed * 200 + total) // (2 * total)


def compute_stats(tasks: Iterable[Task]) -> Stats:
    items = list[Task](tasks)
    total = len(items)
    completed = sum(1 for t in items if t.completed)
    return Stats(
        total=total,
        completed=completed,
        pending=total - completed,
        progress=progress_percent(completed, total),
    )


def filter_tasks(tasks: Iterable[Task], mode: FilterMode = DEFAULT_FILTER) -> list[Task]:
    match mode:
        case "pending":
            return [t for t in tasks if not t.completed]
        case "completed":
            return [t for t in tasks if t.completed]
        case _:
            return list[Task](tasks)


def project(
    tasks: Iterable[Task],
    filter: FilterMode = DEFAULT_FILTER,  # noqa: A002
    sort: SortMode = DEFAULT_SORT,
) -> Projection:
    """Filter, then sort, a copy of ``tasks`` and compute stats over the whole collection."""
    if filter not in FILTER_MODES:
        logger.warning("Unknown filter mode %r; using %r", filter, DEFAULT_FILTER)
        filter = DEFAULT_FILTER  # noqa: A001
    if sort not in SORT_MODES:
        logger.warning("Unknown sort mode %r; using %r", sort, DEFAULT_SORT)
        sort = DEFAULT_SORT

    items = tuple(tasks)
    display = tuple(sort_tasks(filter_tasks(items, filter), sort))
    return Projection(
        display=display,
        stats=compute_stats(items),
        is_empty=len(display) == 0,
        filter=filter,
        sort=sort,
    )
