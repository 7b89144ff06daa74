from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from ticklist.core.models import DEFAULT_FILTER, DEFAULT_SORT, FILTER_MODES, SORT_MODES, FilterMode, SortMode, Task
from ticklist.core.project import Projection, project
from ticklist.core.store import TaskStore
from ticklist.core.theme import Theme, load_theme, next_theme, save_theme
from ticklist.util.logger import setup_logger

if TYPE_CHECKING:
    from ticklist.core.collection import TaskCollection
    from ticklist.storage.base import KeyValueStore

logger = setup_logger("ticklist")


@dataclass(frozen=True)
class AddTask:
    text: str
    due: date | str | None = None


@dataclass(frozen=True)
class ToggleTask:
    task_id: str


@dataclass(frozen=True)
class DeleteTask:
    task_id: str


@dataclass(frozen=True)
class SetFilter:
    mode: str


@dataclass(frozen=True)
class SetSort:
    mode: str


@dataclass(frozen=True)
class CycleTheme:
    pass


Command = AddTask | ToggleTask | DeleteTask | SetFilter | SetSort | CycleTheme


class Session:
    """One user's view of the task list: the store plus the current filter, sort and theme.

    Every command runs to completion and the session re-projects afterwards.
    Filter and sort live only in memory; tasks and theme are persisted.
    """

    def __init__(self, kv: KeyValueStore, collection: TaskCollection | None = None) -> None:
        self.kv = kv
        self.store = TaskStore(kv, collection)
        self.store.load()
        self.theme: Theme = load_theme(kv)
        self.filter: FilterMode = DEFAULT_FILTER
        self.sort: SortMode = DEFAULT_SORT
        self.last_added: Task | None = None

    def projection(self) -> Projection:
        return project(self.store.tasks, self.filter, self.sort)

    def handle(self, command: Command) -> Projection:
        self.last_added = None
        match command:
            case AddTask(text=text, due=due):
                self.last_added = self.store.add(text, due)
            case ToggleTask(task_id=task_id):
                self.store.toggle_complete(task_id)
            case DeleteTask(task_id=task_id):
                self.store.delete(task_id)
            case SetFilter(mode=mode):
                if mode in FILTER_MODES:
                    self.filter = mode  # type: ignore[assignment]
                else:
                    logger.warning("Ignoring unknown filter mode %r", mode)
            case SetSort(mode=mode):
                if mode in SORT_MODES:
                    self.sort = mode  # type: ignore[assignment]
                else:
                    logger.warning("Ignoring unknown sort mode %r", mode)
            case CycleTheme():
                self.theme = next_theme(self.theme)
                save_theme(self.kv, self.theme)
            case _:
                _msg = f"Unknown command: {command!r}"
                raise TypeError(_msg)
        return self.projection()
