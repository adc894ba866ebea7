from .lock import ReadWriteLock
from .key_value_store.backend.interface import KeyValueStore
from .key_value_store.backend.memory import MemoryStore
from .key_value_store.adapter.interface import KeyValueStoreAdapter
from .key_value_store.adapter.native import NativeKeyValueStoreAdapter


__all__ = [
    "ReadWriteLock",
    "KeyValueStore",
    "MemoryStore",
    "KeyValueStoreAdapter",
    "NativeKeyValueStoreAdapter",
]
