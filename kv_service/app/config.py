"""Configuration module for the 'Key-Value'-app."""

import os
from importlib.metadata import version

from kv_service.services import StoreConfig


class AppConfig(StoreConfig):
    """
    Configuration for the 'Key-Value'-app.
    """

    # listen address for running the app as process
    HOST = os.environ.get("HOST") or "0.0.0.0"
    PORT = int(os.environ.get("PORT") or 8080)

    GREETING = "Hello, World!"

    def set_identity(self) -> None:
        super().set_identity()
        self.CONTAINER_SELF_DESCRIPTION["description"] = (
            "This API provides a greeting and a shared in-memory "
            + "key-value store."
        )

        # version
        self.CONTAINER_SELF_DESCRIPTION["version"]["api"] = "1.0.0"
        self.CONTAINER_SELF_DESCRIPTION["version"]["app"] = version(
            "kv-service"
        )
