"""
Tests for utils/rate_limiter.py
"""

from flask import Flask

from utils.rate_limiter import _storage_uri


class TestStorageUri:
    """_storage_uri()"""

    def test_memory_without_redis(self):
        app = Flask(__name__)
        app.config['REDIS_URL'] = None
        assert _storage_uri(app) == "memory://"

    def test_redis_from_app_config(self):
        app = Flask(__name__)
        app.config['REDIS_URL'] = "redis://localhost:6379/0"
        assert _storage_uri(app) == "redis://localhost:6379/0"
