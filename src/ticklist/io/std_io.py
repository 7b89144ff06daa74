# ruff: noqa: T201

from ticklist.core.models import Task
from ticklist.core.project import EMPTY_MESSAGE, Projection, Stats
from ticklist.interfaces.style import COMPLETED_MARK, DUE_MARK, PENDING_MARK, SHORT_ID_LENGTH
from ticklist.util.time import format_due_nice


def format_task(t: Task, *, id_length: int | None = SHORT_ID_LENGTH) -> str:
    mark = COMPLETED_MARK if t.completed else PENDING_MARK
    tid = t.id if id_length is None else t.id[:id_length]
    line = f"[{mark}] {tid} | {t.text}"
    if t.due is not None:
        line += f"  {DUE_MARK} {format_due_nice(t.due)}"
    return line


def format_stats(stats: Stats) -> str:
    return (
        f"total: {stats.total}  completed: {stats.completed}  "
        f"pending: {stats.pending}  progress: {stats.progress}%"
    )


def render_projection(p: Projection, *, id_length: int | None = SHORT_ID_LENGTH) -> list[str]:
    lines = [EMPTY_MESSAGE] if p.is_empty else [format_task(t, id_length=id_length) for t in p.display]
    lines.append(format_stats(p.stats))
    return lines


def print_projection(p: Projection, *, id_length: int | None = SHORT_ID_LENGTH) -> None:
    for line in render_projection(p, id_length=id_length):
        print(line)
