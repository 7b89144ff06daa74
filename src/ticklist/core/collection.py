from dataclasses import dataclass, field

from ticklist.core.models import Task


@dataclass
class TaskCollection:
    """Authoritative ordered task list, owned by one Store.

    Tasks are only ever appended or removed; order is insertion order.
    ``issued_ids`` remembers every id seen so a deleted id is never handed out again.
    """

    tasks: list[Task] = field(default_factory=list)
    issued_ids: set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.tasks)

    def ids(self) -> list[str]:
        return [t.id for t in self.tasks]

    def index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self.tasks):
            if t.id == task_id:
                return i
        return None

    def replace_all(self, tasks: list[Task]) -> None:
        self.tasks = list[Task](tasks)
        self.issued_ids.update(t.id for t in tasks)

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self.tasks)
