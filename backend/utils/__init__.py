"""
Utility modules for the backend.
"""
from .markdown import strip_markdown
from .normalize import (
    ValidationError,
    to_date,
    to_enum,
    to_str,
    validation_error_response,
)
from .rate_limiter import (
    init_limiter,
    get_rate_limit_key,
    RATE_LIMITS,
)

__all__ = [
    'strip_markdown',
    'ValidationError',
    'to_date',
    'to_enum',
    'to_str',
    'validation_error_response',
    'init_limiter',
    'get_rate_limit_key',
    'RATE_LIMITS',
]
