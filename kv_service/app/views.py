"""
Key-Value View-class definition
"""

from flask import Blueprint, Response, jsonify
from data_plumber_http.decorators import flask_handler, flask_args

from kv_service import services

from .config import AppConfig


# endpoints answer regardless of the request method
ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE"]


class KeyValueView(services.View):
    """View-class for greeting and key-value store interaction."""

    NAME = "key-value"

    config: AppConfig

    def configure_bp(self, bp: Blueprint, *args, **kwargs) -> None:

        @bp.route("/greet", methods=ANY_METHOD)
        def greet():
            """Return greeting."""
            return jsonify(message=self.config.GREETING), 200

        @bp.route("/store", methods=ANY_METHOD)
        @flask_handler(
            handler=services.store_handler,
            json=flask_args,
        )
        def store(key: str, value: str):
            """Store key-value pair."""
            self.config.store.set(key, value)
            return Response(status=200, mimetype="text/plain")

        @bp.route("/retrieve", methods=ANY_METHOD)
        @flask_handler(
            handler=services.retrieve_handler,
            json=flask_args,
        )
        def retrieve(key: str):
            """Retrieve value for key."""
            value, found = self.config.store.get(key)
            if not found:
                return Response(
                    f"Unknown key '{key}'.", status=404, mimetype="text/plain"
                )
            return jsonify(message=value), 200
