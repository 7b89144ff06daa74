from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date
from typing import TYPE_CHECKING

from pyresults import Err, Ok, Result

from ticklist.core.collection import TaskCollection
from ticklist.core.models import Task
from ticklist.storage.base import TASKS_KEY
from ticklist.util.ids import gen_task_id
from ticklist.util.logger import setup_logger
from ticklist.util.time import now_ms, parse_due

if TYPE_CHECKING:
    from ticklist.storage.base import KeyValueStore

logger = setup_logger("ticklist")

MAX_ID_ATTEMPTS = 16


# ---- codec ------------------------------------------------------------------


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    # ASCII escapes keep lone surrogates from argv encodable
    return json.dumps([t.to_dict() for t in tasks]).encode("utf-8")


def decode_tasks(raw: bytes | None) -> Result[list[Task], str]:
    """Decode the persisted collection. Any malformed record fails the whole decode."""
    if raw is None:
        return Ok[list[Task], str]([])
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        return Err[list[Task], str](f"Unreadable task data: {e!s}")
    # a stored JSON null reads as "nothing saved yet"
    if data is None:
        return Ok[list[Task], str]([])
    if not isinstance(data, list):
        return Err[list[Task], str](f"Task data is not a list: {type(data).__name__}")

    tasks: list[Task] = []
    seen: set[str] = set[str]()
    for record in data:
        match Task.from_dict(record):
            case Ok(t):
                if t.id in seen:
                    return Err[list[Task], str](f"Duplicate task id: {t.id}")
                seen.add(t.id)
                tasks.append(t)
            case Err(e):
                return Err[list[Task], str](e)
            case _:
                return Err[list[Task], str]("Unexpected error")
    return Ok[list[Task], str](tasks)


# ---- store ------------------------------------------------------------------


class TaskStore:
    """Owns the task collection and writes it through to the medium after every mutation.

    Public API:
        - load(): replace the collection with the persisted one (empty on any problem)
        - add(): append a new task, ``None`` when the text is blank
        - toggle_complete(): flip ``completed`` of a task, no-op for unknown ids
        - delete(): remove a task, no-op for unknown ids
        - persist(): serialize the full collection to the medium

    None of these raise for bad data or unknown ids.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        collection: TaskCollection | None = None,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.kv = kv
        self.collection = collection if collection is not None else TaskCollection()
        self._clock = clock
        self._id_factory = id_factory or (lambda: gen_task_id(self._clock))

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self.collection.snapshot()

    # ---- IO ----

    def load(self) -> TaskCollection:
        match decode_tasks(self.kv.get(TASKS_KEY)):
            case Ok(tasks):
                self.collection.replace_all(tasks)
                logger.debug("Loaded %d tasks", len(tasks))
            case Err(e):
                logger.warning("Discarding persisted tasks: %s", e)
                self.collection.replace_all([])
        return self.collection

    def persist(self, collection: TaskCollection | None = None) -> None:
        collection = collection if collection is not None else self.collection
        match self.kv.set(TASKS_KEY, encode_tasks(collection.tasks)):
            case Err(e):
                # memory stays authoritative; the next successful write catches up
                logger.error("Failed to persist %d tasks: %s", len(collection), e)
            case _:
                logger.debug("Persisted %d tasks", len(collection))

    # ---- mutations ----

    def add(self, text: str, due: date | str | None = None) -> Task | None:
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            logger.debug("Rejected task with blank text")
            return None

        if isinstance(due, str):
            match parse_due(due):
                case Ok(parsed):
                    due = parsed
                case Err(e):
                    logger.debug("%s; adding without a due date", e)
                    due = None

        created_at = self._clock()
        if self.collection.tasks:
            created_at = max(created_at, self.collection.tasks[-1].created_at)

        t = Task(id=self._new_id(), text=text, created_at=created_at, due=due)
        self.collection.tasks.append(t)
        self.collection.issued_ids.add(t.id)
        logger.debug("Added task %s", t.id)
        self.persist()
        return t

    def toggle_complete(self, task_id: str) -> None:
        match self._find(task_id):
            case Ok(i):
                t = self.collection.tasks[i]
                self.collection.tasks[i] = replace(t, completed=not t.completed)
                logger.debug("Toggled task %s -> completed=%s", task_id, not t.completed)
                self.persist()
            case Err(e):
                logger.debug("Ignoring toggle: %s", e)

    def delete(self, task_id: str) -> None:
        match self._find(task_id):
            case Ok(i):
                del self.collection.tasks[i]
                logger.debug("Deleted task %s", task_id)
            case Err(e):
                logger.debug("Ignoring delete: %s", e)
        self.persist()

    # ---- helpers ----

    def get(self, task_id: str) -> Result[Task, str]:
        match self._find(task_id):
            case Ok(i):
                return Ok[Task, str](self.collection.tasks[i])
            case Err(e):
                return Err[Task, str](e)
            case _:
                return Err[Task, str]("Unexpected error")

    def _find(self, task_id: str) -> Result[int, str]:
        i = self.collection.index_of(task_id)
        if i is None:
            return Err[int, str](f"Task not found: {task_id}")
        return Ok[int, str](i)

    def _new_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            tid = self._id_factory()
            if tid not in self.collection.issued_ids:
                return tid
        _msg = f"Could not generate a fresh task id after {MAX_ID_ATTEMPTS} attempts"
        raise RuntimeError(_msg)
