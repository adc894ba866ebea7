"""Key-value store-extension."""

from flask import Flask

from kv_service.db import KeyValueStoreAdapter
from .common import ExtensionLoaderResult, print_status


def store_loader(
    app: Flask, store: KeyValueStoreAdapter
) -> ExtensionLoaderResult:
    """
    Register the `store` extension. The returned result holds the
    given `store`.
    """
    print_status(
        f"Using key-value store '{store.__class__.__name__}' for app "
        + f"'{app.name}'."
    )
    return ExtensionLoaderResult(store)
