"""
View-class interface definition
"""

from typing import Optional
import abc

from flask import Blueprint

from kv_service.services.config import BaseConfig


class View(metaclass=abc.ABCMeta):
    """
    Interface for the definition of a Flask-view-function and its
    related components.

    Keyword arguments:
    config -- `BaseConfig`-object
    """

    NAME = "undefined"

    def __init__(
        self,
        config: BaseConfig,
    ) -> None:
        self.config = config

    @abc.abstractmethod
    def configure_bp(self, bp: Blueprint, *args, **kwargs) -> None:
        """
        Configures and adds routes to the given `bp`.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'configure_bp'."
        )

    def get_blueprint(
        self,
        *args,
        name: Optional[str] = None,
        import_name: Optional[str] = None,
        **kwargs,
    ) -> Blueprint:
        """
        Returns `Blueprint` instance. All positional and keyword args
        are passed into the call to `View.configure_bp`.

        Keyword arguments:
        name -- `Blueprint`'s name
                (default None; uses `self.NAME`)
        import_name -- `Blueprint`'s import-name
                       (default None; uses `__name__`)
        """
        bp = Blueprint(name or self.NAME, import_name or __name__)
        self.configure_bp(bp, *args, **kwargs)
        return bp
