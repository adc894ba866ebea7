"""
Contains a factory for Blueprints defining the default-endpoints of
key-value web-services.
"""

from flask import Blueprint, Response, jsonify
from data_plumber_http.decorators import flask_handler, flask_args

from kv_service.services.handlers import no_args_handler
from .interface import View


class DefaultView(View):
    """
    View-class with routes for the service-level endpoints (liveness and
    self-description) of a key-value web-service.
    """

    NAME = "default"

    def configure_bp(self, bp: Blueprint, *args, **kwargs):

        @bp.route("/ping", methods=["GET"])
        @flask_handler(  # unknown query
            handler=no_args_handler, json=flask_args
        )
        def ping():
            """Handle ping-request."""
            return Response("pong", mimetype="text/plain", status=200)

        @bp.route("/identify", methods=["GET"])
        @flask_handler(  # unknown query
            handler=no_args_handler, json=flask_args
        )
        def identify():
            """Return the service's self-description."""
            return jsonify(self.config.CONTAINER_SELF_DESCRIPTION), 200
