"""Common code for flask-extensions."""

from typing import Optional, Any
import sys
from dataclasses import dataclass
from time import time


@dataclass
class ExtensionLoaderResult:
    """Record-class for extension loader-functions."""

    data: Optional[Any] = None


class PrintStatusSettings:
    """Settings for the `print_status` helper."""
    time0 = time()
    silent = False
    file = sys.stderr


def print_status(msg: str) -> None:
    """Prints `msg` in common format to stderr."""
    if not PrintStatusSettings.silent:
        print(
            f"[{int((time() - PrintStatusSettings.time0)*100)/100}] {msg}",
            file=PrintStatusSettings.file,
        )
