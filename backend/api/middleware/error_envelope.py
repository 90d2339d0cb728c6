"""
Error envelope middleware - Standardize all error responses.

Provides consistent error response format:
{
    "error": {
        "code": "NOT_FOUND",
        "message": "Unknown school: school-999",
        "requestId": "uuid"
    }
}

Input errors raised past a route (utils.normalize.ValidationError or a
pydantic ValidationError) become INVALID_PARAMS with the offending field.
"""

import logging

from flask import Flask, g, jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from utils.normalize import ValidationError

logger = logging.getLogger('api.middleware.error')


# Error codes reference
ERROR_CODES = {
    # Client errors (4xx)
    "BAD_REQUEST": 400,
    "NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
    "CONFLICT": 409,
    "UNSUPPORTED_MEDIA_TYPE": 415,
    "TOO_MANY_REQUESTS": 429,
    "INVALID_PARAMS": 400,

    # Server errors (5xx)
    "INTERNAL_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def make_error_response(
    code: str,
    message: str,
    status_code: int = None,
    field: str = None,
    details: dict = None,
):
    """
    Create a standardized error response.

    Returns:
        Tuple of (response, status_code)
    """
    request_id = getattr(g, 'request_id', None)

    if status_code is None:
        status_code = ERROR_CODES.get(code, 500)

    error = {
        "error": {
            "code": code,
            "message": message,
            "requestId": request_id,
        }
    }
    if field:
        error["error"]["field"] = field
    if details:
        error["error"]["details"] = details

    response = jsonify(error)
    if request_id:
        response.headers['X-Request-ID'] = request_id
    return response, status_code


def pydantic_error_response(error: PydanticValidationError):
    """400 envelope naming the first invalid field of a pydantic model."""
    errors = error.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    return make_error_response(
        "INVALID_PARAMS",
        first.get("msg", "Invalid parameters"),
        field=field,
        details={"errors": [
            {"field": ".".join(str(p) for p in e.get("loc", ())), "message": e.get("msg")}
            for e in errors
        ]},
    )


def setup_error_handlers(app: Flask) -> None:
    """
    Set up standardized error handlers on Flask app.

    Handles:
    - HTTP exceptions (400, 404, 405, ...)
    - Input validation errors
    - Unhandled Python exceptions
    """

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # "Not Found" -> "NOT_FOUND"
        code = error.name.upper().replace(' ', '_')
        return make_error_response(code, error.description, status_code=error.code)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        from utils.normalize import validation_error_response
        return validation_error_response(error)

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_error(error):
        return pydantic_error_response(error)

    @app.errorhandler(Exception)
    def handle_generic_error(error):
        logger.exception(
            f"Unhandled error: {error}",
            extra={
                "event": "unhandled_error",
                "error_type": type(error).__name__,
            }
        )
        return make_error_response(
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            status_code=500,
        )
