"""CORS-extension."""

import sys

from flask import Flask

from .common import ExtensionLoaderResult, print_status


def cors_loader(app: Flask, kwargs=None) -> ExtensionLoaderResult:
    """
    Register the `Flask-CORS` extension with the given `kwargs` if
    possible (i.e. if the package is installed).
    """
    try:
        from flask_cors import CORS
    except ImportError:
        print_status(
            "ERROR: Missing package 'Flask-CORS' for 'ALLOW_CORS=1'. "
            + "Exiting.."
        )
        sys.exit(1)
    _cors = CORS(app, **(kwargs or {}))
    return ExtensionLoaderResult(_cors)
