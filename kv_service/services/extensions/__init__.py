from .common import ExtensionLoaderResult, PrintStatusSettings, print_status
from .cors import cors_loader
from .store import store_loader


__all__ = [
    "ExtensionLoaderResult",
    "PrintStatusSettings",
    "print_status",
    "cors_loader",
    "store_loader",
]
