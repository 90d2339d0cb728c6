"""
Global middleware for API requests.

Provides:
- Request ID injection (X-Request-ID) and request-id log records
- Error envelope standardization
"""

from .request_id import setup_request_id_middleware, get_request_id, RequestIdFilter
from .error_envelope import setup_error_handlers, make_error_response

__all__ = [
    'setup_request_id_middleware',
    'get_request_id',
    'RequestIdFilter',
    'setup_error_handlers',
    'make_error_response',
]
