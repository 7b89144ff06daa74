from abc import ABC, abstractmethod
from collections.abc import Iterator

from pyresults import Result

TASKS_KEY = "todo_v1"
THEME_KEY = "todo_theme"


class KeyValueStore(ABC):
    """Persistence medium: a synchronous key -> bytes store local to one device.

    Public API:
        - get(): read the value stored under a key, ``None`` when absent
        - set(): overwrite the value under a key (last writer wins)
        - delete(): drop a key if present
        - keys(): iterate the stored keys

    Writes report failures (capacity, I/O) as ``Err`` instead of raising, so callers
    can decide to degrade rather than crash.
    """

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: bytes) -> Result[None, str]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> Result[None, str]:
        raise NotImplementedError

    @abstractmethod
    def keys(self) -> Iterator[str]:
        raise NotImplementedError

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
