from __future__ import annotations

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from chat_proxy.domain.errors import ChatProxyError, MethodNotAllowed, RateLimited

logger = logging.getLogger(__name__)


def _error_response(e: ChatProxyError):
    return jsonify({"error": e.message}), e.status_code


def register_error_handlers(app):
    @app.errorhandler(ChatProxyError)
    def chat_proxy_error_handler(e: ChatProxyError):
        return _error_response(e)

    @app.errorhandler(405)
    def method_not_allowed_handler(e):
        return _error_response(MethodNotAllowed())

    @app.errorhandler(429)
    def ratelimit_handler(e):
        logger.warning(f"Rate limit excedido: {e.description}")
        return _error_response(RateLimited())

    @app.errorhandler(HTTPException)
    def http_exception_handler(e: HTTPException):
        return jsonify({"error": e.name}), e.code

    @app.errorhandler(Exception)
    def unhandled_exception_handler(e: Exception):
        # El detalle solo va al log, nunca al cliente
        logger.exception(f"Error no controlado: {e}")
        return jsonify({"error": "Internal Server Error"}), 500
