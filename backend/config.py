import os
from dotenv import load_dotenv

load_dotenv()


def _get_database_url():
    """
    Get DATABASE_URL for the local key-value store.

    The navigator keeps per-user state (follows, progress, notes, custom
    schools) in a single local database. SQLite is the default; any
    SQLAlchemy URL works.

    Render-style postgres:// URLs are rewritten to postgresql://.
    """
    database_url = os.getenv('DATABASE_URL', 'sqlite:///navigator.db')

    # SQLAlchemy requires postgresql://
    if database_url.startswith('postgres://'):
        database_url = database_url.replace('postgres://', 'postgresql://', 1)

    return database_url


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    DEBUG = os.getenv('FLASK_DEBUG', 'True').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    SQLALCHEMY_DATABASE_URI = _get_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Rate limiter storage (memory:// when unset)
    REDIS_URL = os.getenv('REDIS_URL')

    # Advisory client (Anthropic)
    ANTHROPIC_API_KEY = os.getenv('ANTHROPIC_API_KEY')
    AI_MODEL = os.getenv('AI_MODEL', 'claude-sonnet-4-20250514')
    AI_MAX_TOKENS = int(os.getenv('AI_MAX_TOKENS', '1500'))
    AI_TEMPERATURE = float(os.getenv('AI_TEMPERATURE', '0.2'))  # factual answers
    AI_WEB_SEARCH = os.getenv('AI_WEB_SEARCH', 'true').lower() == 'true'
    AI_WEB_SEARCH_MAX_USES = int(os.getenv('AI_WEB_SEARCH_MAX_USES', '3'))
