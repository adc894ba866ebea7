from .handlers import (
    NonEmptyString,
    no_args_handler,
    store_handler,
    retrieve_handler,
)
from .config import BaseConfig, StoreConfig
from .views.interface import View
from .views.default import DefaultView


__all__ = [
    "NonEmptyString",
    "no_args_handler",
    "store_handler",
    "retrieve_handler",
    "BaseConfig",
    "StoreConfig",
    "View",
    "DefaultView",
]
