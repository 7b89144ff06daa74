from collections.abc import Iterator

from pyresults import Err, Ok, Result

from ticklist.storage.base import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    """Dict backed medium with an optional byte quota (key + value lengths)."""

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = capacity
        self._data: dict[str, bytes] = {}

    def _used(self) -> int:
        return sum(len(k.encode("utf-8")) + len(v) for k, v in self._data.items())

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> Result[None, str]:
        if self.capacity is not None:
            old = self._data.get(key)
            freed = 0 if old is None else len(key.encode("utf-8")) + len(old)
            needed = self._used() - freed + len(key.encode("utf-8")) + len(value)
            if needed > self.capacity:
                return Err[None, str](f"Quota exceeded: {needed} > {self.capacity} bytes (key={key})")
        self._data[key] = bytes(value)
        return Ok[None, str](None)

    def delete(self, key: str) -> Result[None, str]:
        self._data.pop(key, None)
        return Ok[None, str](None)

    def keys(self) -> Iterator[str]:
        return iter(list[str](self._data))
