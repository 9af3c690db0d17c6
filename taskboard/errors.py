"""Error handlers with OpenTelemetry trace context."""

import logging
from typing import Any

from flask import Flask, jsonify
from marshmallow import ValidationError
from opentelemetry import trace
from sqlalchemy.exc import IntegrityError


logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int, **extra: Any) -> tuple:
    """Create error response with trace context.

    Use this function in routes instead of returning jsonify directly.

    Args:
        message: Error message.
        status_code: HTTP status code.
        **extra: Additional fields merged into the body.

    Returns:
        Tuple of (response, status_code).
    """
    response: dict[str, Any] = {"error": message, **extra}

    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        response["trace_id"] = format(span_context.trace_id, "032x")

    return jsonify(response), status_code


def format_validation_messages(messages: dict | list) -> str:
    """Flatten marshmallow messages into one readable line.

    >>> format_validation_messages({"name": ["Missing data for required field."]})
    'name: Missing data for required field.'
    """
    if isinstance(messages, list):
        return " ".join(str(m) for m in messages)

    parts = []
    for field, errors in messages.items():
        text = format_validation_messages(errors) if isinstance(errors, (dict, list)) else errors
        parts.append(f"{field}: {text}")
    return "; ".join(parts)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(ValidationError)
    def validation_error(error: ValidationError):
        message = format_validation_messages(error.messages)
        logger.info(f"Rejected request: {message}")
        return error_response(message, 400, fields=error.messages)

    @app.errorhandler(IntegrityError)
    def integrity_error(error: IntegrityError):
        logger.warning(f"Store constraint violated: {error.orig}")
        return error_response(str(error.orig), 400)

    @app.errorhandler(400)
    def bad_request(error):
        return error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled error: {error}")
        return error_response("Internal server error", 500)
