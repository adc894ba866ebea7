"""
This module contains an interface for the definition of adapters to
different key-value store-type backends.
"""

from typing import Optional
import abc


class KeyValueStoreAdapter(metaclass=abc.ABCMeta):
    """
    Interface for adapters to key-value store-type backends.

    # Implementation guide
    A new `KeyValueStoreAdapter`-type can inherit most requirements directly
    from this class. Below are the requirements imposed by the
    interface.

    ## Required definitions
    * `set` writes value for given key
    * `get` returns value for given key along with a found-flag
    * `keys` list existing keys
    """
    @classmethod
    def __subclasshook__(cls, subclass):
        return (
            hasattr(subclass, "set")
            and hasattr(subclass, "get")
            and hasattr(subclass, "keys")
            and callable(subclass.set)
            and callable(subclass.get)
            and callable(subclass.keys)
            or NotImplemented
        )

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Writes `value` for a given `key`.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'set'."
        )

    @abc.abstractmethod
    def get(self, key: str) -> tuple[Optional[str], bool]:
        """
        Returns a tuple of stored value and `True` for a given `key` or
        `(None, False)` if that key is unknown.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'get'."
        )

    @abc.abstractmethod
    def keys(self) -> tuple[str, ...]:
        """
        Returns a tuple of `key`s in the store.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'keys'."
        )
