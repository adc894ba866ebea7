"""
- Key-Value Service -
This flask app implements the 'Key-Value'-API: a greeting and a shared
in-memory key-value store.
"""

from typing import Optional

from flask import Flask
from kv_service.services import DefaultView
from kv_service.services import extensions

from .config import AppConfig
from .views import KeyValueView


def app_factory(
    config: AppConfig,
    name: Optional[str] = None,
) -> Flask:
    """
    Returns a flask-app-object.

    config -- app config derived from `AppConfig`; the app operates on
              the key-value store held by `config.store`
    name -- app's import-name
            (default None; uses `__name__`)
    """

    app = Flask(name or __name__)
    app.config.from_object(config)

    # register extensions
    if config.ALLOW_CORS:
        app.extensions["cors"] = extensions.cors_loader(app)
    app.extensions["store"] = extensions.store_loader(app, config.store)

    # register blueprints
    app.register_blueprint(
        DefaultView(config).get_blueprint(),
        url_prefix="/",
    )
    app.register_blueprint(
        KeyValueView(config).get_blueprint(),
        url_prefix="/"
    )

    return app


__all__ = ["app_factory", "AppConfig"]
