"""
Request ID middleware - Correlate responses and log lines.

Every request gets an id (the caller's X-Request-ID header, or a fresh
UUID). It is stored on g, echoed in the response header and stamped onto
log records through RequestIdFilter.
"""

import logging
import uuid

from flask import Flask, g, has_request_context, request


class RequestIdFilter(logging.Filter):
    """Adds `request_id` to every record ('-' outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = None
        if has_request_context():
            request_id = getattr(g, 'request_id', None)
        record.request_id = request_id or '-'
        return True


def setup_request_id_middleware(app: Flask) -> None:
    """Register the before/after hooks that manage X-Request-ID."""

    @app.before_request
    def inject_request_id():
        g.request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())

    @app.after_request
    def add_request_id_header(response):
        if hasattr(g, 'request_id'):
            response.headers['X-Request-ID'] = g.request_id
        return response


def get_request_id() -> str:
    """Current request id, or a new UUID outside a request."""
    if has_request_context() and hasattr(g, 'request_id'):
        return g.request_id
    return str(uuid.uuid4())
