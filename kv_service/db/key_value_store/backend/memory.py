"""
This module contains a definition for an in-memory key-value store-type
backend.
"""

from .interface import KeyValueStore


class MemoryStore(KeyValueStore):
    """
    A minimalistic implementation of a `KeyValueStore` working in
    memory (non-persistent).

    Notable properties:
    * Writing an already existing key simply overwrites data.
    * Reading a non-existing key returns `None` instead.
    """

    def __init__(self) -> None:
        self._database: dict[str, str] = {}

    def _read(self, key):
        return self._database.get(key)

    def _write(self, key, value):
        self._database[key] = value

    def keys(self):
        return tuple(self._database.keys())
