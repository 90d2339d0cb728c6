"""
Pytest configuration for backend tests.

Provides:
- backend/ on sys.path so `from services.x import ...` works
- app/client fixtures over an in-memory SQLite database
- a mocked Anthropic client wired into the advisory service
- make_school() factory for hand-built catalog records
"""

import sys
from pathlib import Path

# Add backend directory to Python path so imports like
# `from services.filter_engine import ...` and `from utils.normalize import ...` work
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from constants import Curriculum, SchoolType
from models.school import School

# Pinned "today" for countdown-dependent assertions
TODAY = "2024-10-01"


def build_school(**overrides) -> School:
    fields = dict(
        id="test-school",
        name="Test Primary School",
        name_zh="測試小學",
        location="1 Test Road, Central",
        district="Central and Western (中西區)",
        tuition_fee="HK$50,000 / yr",
        curriculum=(Curriculum.DSE,),
        language=("English",),
        type=SchoolType.PRIVATE,
        ranking=1,
        application_start="2024-09-01",
        application_end="2024-11-15",
        interview_date="November",
    )
    fields.update(overrides)
    return School(**fields)


@pytest.fixture
def make_school():
    """Factory for School records; any field can be overridden."""
    return build_school


@pytest.fixture
def app():
    """Create test Flask application with a fresh in-memory database."""
    from app import create_app

    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'RATELIMIT_DISABLED': True,
        'ANTHROPIC_API_KEY': None,
        'TODAY': TODAY,
    })
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


def _text_response(text, citations=None):
    block = SimpleNamespace(type="text", text=text, citations=citations or [])
    return SimpleNamespace(content=[block])


@pytest.fixture
def text_response():
    """Builder for a fake Messages API response with one text block."""
    return _text_response


@pytest.fixture
def mock_anthropic():
    """MagicMock standing in for anthropic.Anthropic()."""
    client = MagicMock()
    client.messages.create.return_value = _text_response("DBS 的申请截止日期是 2024-11-15。")
    return client


@pytest.fixture
def advisor_app(app, mock_anthropic):
    """App whose advisory service talks to the mocked client."""
    from services.ai_service import AdvisoryService

    app.extensions['advisory_service'] = AdvisoryService(
        api_key="test-key", model="test-model", client=mock_anthropic,
    )
    return app


@pytest.fixture
def advisor_client(advisor_app):
    return advisor_app.test_client()
