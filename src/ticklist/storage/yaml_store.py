from collections.abc import Iterator
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pyresults import Err, Ok, Result

from ticklist.storage.base import KeyValueStore
from ticklist.util.logger import setup_logger

logger = setup_logger("ticklist")


class YAMLKeyValueStore(KeyValueStore):
    """Medium persisted as ``{"kv": {key: value}}`` in one YAML file.

    UTF-8 values are kept as plain text so the file stays readable; anything else is
    written as ``!!binary``. Every write rewrites the whole file.
    """

    def __init__(self, data_path: str) -> None:
        self.data_path = data_path
        self._data: dict[str, bytes] = {}
        self.load()

    # ---- basic IO ----

    def load(self) -> None:
        _path = Path(self.data_path)
        self._data = {}
        if not _path.exists():
            return
        try:
            with _path.open(encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError, UnicodeDecodeError) as e:
            _msg = f"Failed to load YAML file: {e}"
            logger.warning(_msg)
            return
        kv = raw.get("kv") if isinstance(raw, dict) else None
        if not isinstance(kv, dict):
            logger.warning("Ignoring YAML file without a 'kv' mapping: %s", self.data_path)
            return
        for key, value in kv.items():
            match value:
                case str():
                    self._data[str(key)] = value.encode("utf-8")
                case bytes():
                    self._data[str(key)] = value
                case _:
                    logger.warning("Skipping non-string value for key %r in %s", key, self.data_path)

    def save(self) -> Result[None, str]:
        raw = {"kv": {k: self._to_yaml_value(v) for k, v in self._data.items()}}
        _path = Path(self.data_path)
        try:
            _path.parent.mkdir(parents=True, exist_ok=True)
            with _path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(raw, f, allow_unicode=True, sort_keys=True)
        except OSError as e:
            return Err[None, str](f"Failed to write YAML file {self.data_path}: {e!s}")
        return Ok[None, str](None)

    @staticmethod
    def _to_yaml_value(value: bytes) -> str | bytes:
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value

    # ---- key access ----

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> Result[None, str]:
        previous = self._data.get(key)
        self._data[key] = bytes(value)
        res = self.save()
        if res.is_err():
            # keep memory consistent with what is on disk
            if previous is None:
                self._data.pop(key, None)
            else:
                self._data[key] = previous
        return res

    def delete(self, key: str) -> Result[None, str]:
        if key not in self._data:
            return Ok[None, str](None)
        previous = self._data.pop(key)
        res = self.save()
        if res.is_err():
            self._data[key] = previous
        return res

    def keys(self) -> Iterator[str]:
        return iter(list[str](self._data))
