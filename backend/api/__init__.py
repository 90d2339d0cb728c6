"""
API package - Shared request/response plumbing for the route blueprints.

This package provides:
- Global middleware (request_id, error_envelope)
- Response envelopes and school/state serializers
"""

from .middleware import setup_error_handlers, setup_request_id_middleware
from .serializers import success_envelope

__all__ = ['setup_error_handlers', 'setup_request_id_middleware', 'success_envelope']
