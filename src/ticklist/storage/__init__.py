from ticklist.storage.base import TASKS_KEY, THEME_KEY, KeyValueStore
from ticklist.storage.memory_store import MemoryKeyValueStore
from ticklist.storage.sqlite3_store import SQLiteKeyValueStore
from ticklist.storage.yaml_store import YAMLKeyValueStore
from ticklist.util.dirs import load_env

__all__ = [
    "TASKS_KEY",
    "THEME_KEY",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "YAMLKeyValueStore",
    "get_kv_store",
]


def get_kv_store(data_path: str | None = None) -> KeyValueStore:
    data_path = data_path or load_env()["DATA_PATH"]
    if data_path.endswith((".yaml", ".yml")):
        return YAMLKeyValueStore(data_path)
    if data_path.endswith((".db", ".sqlite3")):
        return SQLiteKeyValueStore(data_path)
    _msg = f"Invalid data path: {data_path} (expected .yaml/.yml or .db/.sqlite3)"
    raise ValueError(_msg)
