import logging

from flask import g, jsonify, redirect
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException

class ApiError(Exception):
    status_code = 400
    code = "bad_request"

    def __init__(self, message, status_code=None, code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details or {}

class ConfigurationError(ApiError):
    """Store or secret missing: every request fails with a 500."""
    status_code = 500
    code = "configuration_error"

class ValidationError(ApiError):
    status_code = 400
    code = "validation_error"

class AuthError(ApiError):
    status_code = 401
    code = "unauthorized"

class NotFoundError(ApiError):
    status_code = 404
    code = "not_found"

def _json_error(message, status, code, details=None):
    return jsonify({
        "error": {"code": code, "message": message, "details": details or {}}
    }), status

def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return _json_error(e.message, e.status_code, e.code, e.details)

    @app.errorhandler(SchemaValidationError)
    def handle_validation_error(e: SchemaValidationError):
        return _json_error("Invalid request body.", 400, "validation_error", e.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        # routes inconnues / méthodes non supportées -> retour à l'accueil
        if e.code in (404, 405):
            return redirect("/", code=302)
        return _json_error(e.description or "HTTP error", e.code or 500, "http_error")

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logging.getLogger("kvnotes.error").exception(
            "unexpected_error", extra={"request_id": getattr(g, "request_id", "-")}
        )
        return _json_error("Internal server error.", 500, "internal_error")
