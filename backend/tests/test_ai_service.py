"""
Tests for services/ai_service.py and services/ai_context.py

These tests use a mocked Anthropic client; nothing reaches the network.
A live smoke test is marked integration (run with --run-integration).
"""

import os
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from constants import ADVISOR_FALLBACK, Curriculum, SchoolType
from services.ai_context import build_advisory_context, build_lookup_prompt, build_monitor_prompt
from services.ai_service import (
    SOURCES_HEADING,
    AdvisoryService,
    parse_lookup_payload,
    with_sources,
)
from services.catalog import get_base_schools


@pytest.fixture
def service(mock_anthropic):
    return AdvisoryService(api_key="test-key", model="test-model", client=mock_anthropic)


def citation(url):
    return SimpleNamespace(url=url, title="source")


# =============================================================================
# ask()
# =============================================================================

class TestAsk:
    """AdvisoryService.ask()"""

    def test_returns_text_without_markdown(self, service, mock_anthropic, text_response):
        mock_anthropic.messages.create.return_value = text_response("## 建议\n**Apply early** to DBS.")
        answer = service.ask("When should I apply?", "ctx")
        assert answer == " 建议\nApply early to DBS."

    def test_request_shape(self, service, mock_anthropic):
        with patch("services.ai_service.Config") as config:
            config.AI_WEB_SEARCH = True
            config.AI_WEB_SEARCH_MAX_USES = 2
            config.AI_MAX_TOKENS = 100
            config.AI_TEMPERATURE = 0.2
            service.ask("Fees at CIS?", "Current School Database ...")

        kwargs = mock_anthropic.messages.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.2
        assert kwargs["tools"] == [
            {"type": "web_search_20250305", "name": "web_search", "max_uses": 2}
        ]
        content = kwargs["messages"][0]["content"]
        assert content.startswith("Context: Current School Database")
        assert content.endswith("User Question: Fees at CIS?")

    def test_web_search_disabled_sends_no_tools(self, service, mock_anthropic):
        with patch("services.ai_service.Config") as config:
            config.AI_WEB_SEARCH = False
            config.AI_MAX_TOKENS = 100
            config.AI_TEMPERATURE = 0.2
            service.ask("q", "ctx")
        assert "tools" not in mock_anthropic.messages.create.call_args.kwargs

    def test_citations_appended_as_sources(self, service, mock_anthropic):
        block = SimpleNamespace(
            type="text",
            text="Deadline is 15 Nov.",
            citations=[citation("https://a.example"), citation("https://a.example"),
                       citation("https://b.example")],
        )
        mock_anthropic.messages.create.return_value = SimpleNamespace(content=[block])

        answer = service.ask("q", "ctx")
        assert answer == (
            f"Deadline is 15 Nov.\n\n{SOURCES_HEADING}\n- https://a.example\n- https://b.example"
        )

    def test_api_error_falls_back(self, service, mock_anthropic):
        mock_anthropic.messages.create.side_effect = RuntimeError("quota exceeded")
        assert service.ask("q", "ctx") == ADVISOR_FALLBACK

    def test_empty_text_falls_back(self, service, mock_anthropic):
        mock_anthropic.messages.create.return_value = SimpleNamespace(content=[])
        assert service.ask("q", "ctx") == ADVISOR_FALLBACK

    def test_missing_key_falls_back(self):
        service = AdvisoryService(api_key="", model="test-model")
        assert service.configured is False
        assert service.ask("q", "ctx") == ADVISOR_FALLBACK


# =============================================================================
# monitor() and lookup()
# =============================================================================

class TestMonitor:
    """AdvisoryService.monitor()"""

    def test_digest(self, service, mock_anthropic, text_response):
        mock_anthropic.messages.create.return_value = text_response("* CIS: no change")
        assert service.monitor(["Chinese International School"]) == " CIS: no change"
        content = mock_anthropic.messages.create.call_args.kwargs["messages"][0]["content"]
        assert "- Chinese International School" in content

    def test_failure_is_none(self, service, mock_anthropic):
        mock_anthropic.messages.create.side_effect = ConnectionError("offline")
        assert service.monitor(["x"]) is None


class TestLookup:
    """AdvisoryService.lookup() and parse_lookup_payload()"""

    def test_lookup_parses_json(self, service, mock_anthropic, text_response):
        mock_anthropic.messages.create.return_value = text_response(
            '{"nameZh": "漢基國際學校", "type": "International", "curriculum": ["IB", "Montessori"]}'
        )
        result = service.lookup("Chinese International School")
        assert result.name_zh == "漢基國際學校"
        assert result.school_type == SchoolType.INTERNATIONAL
        assert result.curriculum == [Curriculum.IB]
        # Lookup never asks for web search tools
        assert "tools" not in mock_anthropic.messages.create.call_args.kwargs

    def test_fenced_json_accepted(self):
        result = parse_lookup_payload('```json\n{"district": "Eastern (東區)"}\n```')
        assert result.present_fields() == {"district": "Eastern (東區)"}

    @pytest.mark.parametrize("raw", ["", "not json", "[1, 2]", "\"text\"", "null"])
    def test_malformed_is_total_failure(self, raw):
        assert parse_lookup_payload(raw) is None

    def test_unknown_type_dropped(self):
        result = parse_lookup_payload('{"type": "Boarding", "name": "X"}')
        assert result.school_type is None
        assert result.present_fields() == {"name": "X"}

    def test_non_list_language_becomes_empty(self):
        result = parse_lookup_payload('{"language": "English"}')
        assert result.language == []

    def test_bad_date_dropped(self):
        result = parse_lookup_payload('{"applicationEnd": "mid November"}')
        assert result.application_end is None

    def test_lookup_error_is_none(self, service, mock_anthropic):
        mock_anthropic.messages.create.side_effect = ValueError("boom")
        assert service.lookup("x") is None


# =============================================================================
# Prompt builders
# =============================================================================

class TestContext:
    """services/ai_context.py"""

    def test_advisory_context_samples_first_ten(self):
        schools = list(get_base_schools())
        context = build_advisory_context(schools)
        assert "Diocesan Boys' School Primary Division (拔萃男書院附屬小學)" in context
        assert "Hong Kong International School (香港國際學校)" in context
        assert schools[10].name not in context
        assert "100 top HK primary schools" in context

    def test_monitor_prompt_lists_names(self):
        prompt = build_monitor_prompt(["A", "B"])
        assert prompt.endswith("- A\n- B")

    def test_lookup_prompt_names_keys(self):
        prompt = build_lookup_prompt("Kellett School")
        assert '"Kellett School"' in prompt
        assert "applicationEnd" in prompt

    def test_with_sources_no_urls(self):
        assert with_sources("text", []) == "text"


@pytest.mark.integration
def test_live_ask():
    """Real API call; needs ANTHROPIC_API_KEY."""
    if not os.getenv("ANTHROPIC_API_KEY"):
        pytest.skip("ANTHROPIC_API_KEY not set")
    answer = AdvisoryService().ask("DBS 小一入學申請何時截止?", "HK primary schools")
    assert answer and answer != ADVISOR_FALLBACK
