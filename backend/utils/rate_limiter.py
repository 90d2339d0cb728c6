"""
Rate Limiter Configuration

Protects the advisory endpoints, which spend model API quota on every
call. Uses Redis when REDIS_URL is set, memory storage otherwise.
"""

import logging
from flask import request

logger = logging.getLogger(__name__)


def _storage_uri(app) -> str:
    redis_url = app.config.get("REDIS_URL")
    if redis_url:
        logger.info("Rate limiter using Redis storage")
        return redis_url
    return "memory://"


def get_rate_limit_key():
    """Single local user: key by client address."""
    return f"ip:{request.remote_addr}"


# Per-endpoint rate limits (tune by cost)
RATE_LIMITS = {
    # Model-backed endpoints (ask, monitor, lookup)
    "advisor": "10 per minute",

    # Local reads and writes
    "default": "300 per minute",
}

DEFAULT_LIMITS = [RATE_LIMITS["default"]]


def init_limiter(app):
    """
    Initialize Flask-Limiter with the app.

    Returns the limiter instance for decorator use:
        limiter.limit(RATE_LIMITS["advisor"])(advisor_bp)
    """
    from flask_limiter import Limiter

    storage_uri = _storage_uri(app)
    limiter = Limiter(
        key_func=get_rate_limit_key,
        app=app,
        default_limits=DEFAULT_LIMITS,
        storage_uri=storage_uri,
        key_prefix="rate_limit",
        headers_enabled=True,
        enabled=not app.config.get("RATELIMIT_DISABLED", False),
    )

    @app.errorhandler(429)
    def ratelimit_handler(e):
        return {
            "error": {
                "code": "TOO_MANY_REQUESTS",
                "message": str(e.description),
            },
        }, 429

    logger.info(f"Rate limiter initialized with storage: {storage_uri}")
    return limiter
