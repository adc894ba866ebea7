"""
This module contains an interface for the definition of key-value store-
type backends.
"""

from typing import Optional
import abc


class KeyValueStore(metaclass=abc.ABCMeta):
    """
    Interface for key-value store-type backends mapping text-keys to
    text-values.

    A backend is not required to handle concurrent access (see
    `KeyValueStoreAdapter` for that).

    # Implementation guide
    A new `KeyValueStore`-type can inherit most requirements directly
    from this class. Below are the requirements imposed by the
    interface.

    ## Required definitions
    * `_write` specifies how a value is written into the store
    * `_read` specifies how a value is retrieved from the store
      (should return `None` for unknown keys)
    * `keys` specifies how information regarding available keys can be
      generated

    ## Optional definitions
    * `_SUPPORTED_TYPES` specifies what key and value types are
      supported
    """
    @classmethod
    def __subclasshook__(cls, subclass):
        return (
            hasattr(subclass, "_write")
            and hasattr(subclass, "_read")
            and hasattr(subclass, "keys")
            and callable(subclass._write)
            and callable(subclass._read)
            and callable(subclass.keys)
            or NotImplemented
        )

    _SUPPORTED_TYPES: tuple[type, ...] = (str, )

    @abc.abstractmethod
    def _write(self, key: str, value: str) -> None:
        """
        Writes `value` for a given `key`.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method '_write'."
        )

    @abc.abstractmethod
    def _read(self, key: str) -> Optional[str]:
        """
        Returns the value for a given `key` or `None`.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method '_read'."
        )

    @abc.abstractmethod
    def keys(self) -> tuple[str, ...]:
        """
        Returns a tuple of `key`s in the store.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'keys'."
        )

    def _check_type(self, name: str, obj) -> None:
        if not isinstance(obj, self._SUPPORTED_TYPES):
            raise TypeError(
                f"{self.__class__.__name__} does not support "
                + f"{obj.__class__.__name__} as {name} but only "
                + f"{', '.join(map(lambda x: x.__name__, self._SUPPORTED_TYPES))}."
            )

    def write(self, key: str, value: str) -> None:
        """
        Write `value` for a given `key`. Existing records are
        overwritten.

        Raises `TypeError` if the type of `key` or `value` is not
        supported.
        """
        self._check_type("key", key)
        self._check_type("value", value)
        self._write(key, value)

    def read(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given `key` (`None` if not present).
        """
        return self._read(key)
