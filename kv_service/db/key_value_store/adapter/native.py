"""
This module contains a definition for a key-value store-type adapter
that operates purely in native python.
"""

from kv_service.db.lock import ReadWriteLock
from kv_service.db.key_value_store.backend.interface import KeyValueStore
from .interface import KeyValueStoreAdapter


class NativeKeyValueStoreAdapter(KeyValueStoreAdapter):
    """
    Implementation of a `KeyValueStoreAdapter` working in native python.
    It is designed to handle concurrent requests: reads may run in
    parallel while writes are exclusive (see `ReadWriteLock`).

    Keyword arguments:
    db -- instance of a KeyValueStore-implementation
    """

    def __init__(self, db: KeyValueStore) -> None:
        self._db = db
        self._lock = ReadWriteLock()

    def set(self, key, value):
        with self._lock.write():
            self._db.write(key, value)

    def get(self, key):
        with self._lock.read():
            value = self._db.read(key)
        return value, value is not None

    def keys(self):
        with self._lock.read():
            return self._db.keys()
