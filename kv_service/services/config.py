"""Base configuration classes for key-value web-services."""

import os
import sys
import importlib.metadata

from kv_service.db import MemoryStore, NativeKeyValueStoreAdapter


# pylint: disable=invalid-name


class BaseConfig:
    """
    Base configuration class for key-value web-services.
    """

    # allow CORS (requires python package Flask-CORS)
    ALLOW_CORS = (int(os.environ.get("ALLOW_CORS") or 0)) == 1

    def __init__(self) -> None:
        self.CONTAINER_SELF_DESCRIPTION = {}
        self.set_identity()

    def set_identity(self) -> None:
        """
        Load dictionary with self-description based on current settings.

        When inheriting from this config-class with a custom
        self-description, the `set_identity`-default can be loaded with
        `super().set_identity()`.
        """
        self.CONTAINER_SELF_DESCRIPTION = {
            "description": "unconfigured service",
            "version": {
                "api": None,
                "app": None,
                "python": sys.version,
                "lib": {
                    lib.name: lib.version
                    for lib in importlib.metadata.distributions()
                },
            },
            "configuration": {
                "settings": {
                    "allow_cors": self.ALLOW_CORS,
                },
            },
        }


class StoreConfig(BaseConfig):
    """
    Configuration class extension for web-services that hold a shared
    key-value store.
    """

    # only the in-memory backend is available
    STORE_BACKEND = "memory"

    def __init__(self) -> None:
        self.init_store()
        super().__init__()

    def init_store(self) -> None:
        """
        Initializes key-value store-adapter `self.store` based on
        current attributes.
        """
        match self.STORE_BACKEND:
            case "memory":
                self.store = NativeKeyValueStoreAdapter(MemoryStore())
            case _:
                raise ValueError(
                    f"Unknown store-backend identifier '{self.STORE_BACKEND}'"
                )

    def set_identity(self) -> None:
        super().set_identity()

        self.CONTAINER_SELF_DESCRIPTION["configuration"]["settings"][
            "store"
        ] = {
            "backend": self.STORE_BACKEND,
            "adapter": self.store.__class__.__name__,
        }
