"""
AI Service - Admissions advisory client

Wraps the Anthropic Messages API for the three model-backed features:
- ask(question, context): free-form admissions advice
- monitor(names): admissions-update digest for monitored schools
- lookup(name): partial school record used to pre-fill the intake form

Failure policy: every network, quota or parsing error is caught here and
turned into a fixed fallback (apology string for ask, None for monitor
and lookup). Nothing propagates to the routes.

Display text is passed through utils.markdown.strip_markdown before it
is returned.
"""

import json
import logging
import re
from typing import List, Optional, Sequence

from config import Config
from constants import ADVISOR_FALLBACK
from schemas.school import LookupResult
from services.ai_context import build_lookup_prompt, build_monitor_prompt
from utils.markdown import strip_markdown

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an expert Hong Kong primary school admission consultant. "
    "If the user asks for dates, fees, or news about specific schools for the current "
    "year (2024/2025), use your search tool to provide the most accurate and up-to-date "
    "details. Reply in a professional yet empathetic tone, using both Chinese and English "
    "as appropriate."
)

LOOKUP_SYSTEM_PROMPT = (
    "You extract structured admissions data about Hong Kong primary schools. "
    "You reply with JSON only."
)

SOURCES_HEADING = "参考来源:"

_JSON_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def _response_text(response) -> str:
    """Concatenate the text blocks of a Messages API response."""
    parts = []
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "text":
            parts.append(block.text)
    return "".join(parts)


def _citation_urls(response) -> List[str]:
    """Unique web citation URLs, first occurrence order."""
    urls = []
    for block in getattr(response, "content", None) or []:
        for citation in getattr(block, "citations", None) or []:
            url = getattr(citation, "url", None)
            if url and url not in urls:
                urls.append(url)
    return urls


def with_sources(text: str, urls: Sequence[str]) -> str:
    if not urls:
        return text
    links = "\n".join(f"- {url}" for url in urls)
    return f"{text}\n\n{SOURCES_HEADING}\n{links}"


def parse_lookup_payload(raw: str) -> Optional[LookupResult]:
    """
    Parse the model's lookup reply.

    Anything that is not a JSON object is a total lookup failure.
    """
    if not raw:
        return None
    cleaned = _JSON_FENCE.sub("", raw.strip())
    try:
        payload = json.loads(cleaned)
    except ValueError:
        logger.warning("Lookup response is not valid JSON")
        return None
    if not isinstance(payload, dict):
        logger.warning(f"Lookup response is a {type(payload).__name__}, expected object")
        return None
    return LookupResult.from_payload(payload)


class AdvisoryService:
    """
    Advisory client for the assistant panel and intake form.

    Uses Anthropic Claude API (non-streaming; the panel shows the full reply).
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 client=None):
        self._api_key = api_key if api_key is not None else Config.ANTHROPIC_API_KEY
        self._model = model or Config.AI_MODEL
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self._api_key)

    @property
    def model(self) -> str:
        return self._model

    @property
    def client(self):
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            if not self._api_key:
                raise ValueError("ANTHROPIC_API_KEY not configured")

            import anthropic
            self._client = anthropic.Anthropic(api_key=self._api_key)

        return self._client

    def _tools(self) -> list:
        if not Config.AI_WEB_SEARCH:
            return []
        return [{
            "type": "web_search_20250305",
            "name": "web_search",
            "max_uses": Config.AI_WEB_SEARCH_MAX_USES,
        }]

    def _create(self, system: str, content: str, tools: list):
        kwargs = dict(
            model=self._model,
            max_tokens=Config.AI_MAX_TOKENS,
            temperature=Config.AI_TEMPERATURE,
            system=system,
            messages=[{"role": "user", "content": content}],
        )
        if tools:
            kwargs["tools"] = tools
        return self.client.messages.create(**kwargs)

    def ask(self, question: str, context: str) -> str:
        """Answer an admissions question. Falls back to a fixed apology."""
        try:
            response = self._create(
                SYSTEM_PROMPT,
                f"Context: {context}\n\nUser Question: {question}",
                self._tools(),
            )
            text = _response_text(response).strip()
            if not text:
                return ADVISOR_FALLBACK
            return strip_markdown(with_sources(text, _citation_urls(response)))
        except Exception as e:
            logger.error(f"Advisory ask error: {e}")
            return ADVISOR_FALLBACK

    def monitor(self, school_names: Sequence[str]) -> Optional[str]:
        """Admissions-update digest for the given schools, or None on failure."""
        try:
            response = self._create(
                SYSTEM_PROMPT,
                build_monitor_prompt(school_names),
                self._tools(),
            )
            text = _response_text(response).strip()
            if not text:
                return None
            return strip_markdown(with_sources(text, _citation_urls(response)))
        except Exception as e:
            logger.error(f"Advisory monitor error: {e}")
            return None

    def lookup(self, school_name: str) -> Optional[LookupResult]:
        """Partial school record for the intake form, or None on failure."""
        try:
            response = self._create(LOOKUP_SYSTEM_PROMPT, build_lookup_prompt(school_name), [])
            return parse_lookup_payload(_response_text(response))
        except Exception as e:
            logger.error(f"Advisory lookup error: {e}")
            return None
