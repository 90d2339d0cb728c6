"""
Advisor Routes - Model-backed admissions assistance

Endpoints:
    POST /api/advisor/ask      - Free-form admissions question
    POST /api/advisor/monitor  - Update digest for the monitored schools
    POST /api/advisor/lookup   - Pre-fill the custom school form by name
    GET  /api/advisor/health   - Model configuration and in-flight status

Rate limited to 10/minute (see app.create_app). Each call site allows one
request in flight; a second submission while busy gets 409 CONFLICT.
Model failures never surface as errors: ask returns a fixed apology,
monitor and lookup report failure in the payload.
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from api.middleware.error_envelope import make_error_response
from api.serializers import success_envelope
from constants import (
    ADVISOR_FALLBACK,
    NOTICE_ADVISOR_BUSY,
    NOTICE_LOOKUP_FAILED,
    NOTICE_MONITOR_EMPTY,
)
from config import Config
from services.ai_context import build_advisory_context
from services.ai_service import AdvisoryService
from services.intake import prefill_draft
from services.session import get_session
from utils.normalize import ValidationError, to_str

logger = logging.getLogger(__name__)

advisor_bp = Blueprint('advisor', __name__)


def _advisory_service() -> AdvisoryService:
    return current_app.extensions['advisory_service']


def _required_text(body: dict, key: str) -> str:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string", field=key, received_value=value)
    text = to_str(value)
    if text is None:
        raise ValidationError(f"{key} is required", field=key)
    return text


def _run_in_slot(name: str, call):
    """
    Run `call` holding the named request slot.

    Returns (result, is_latest), or None when the slot is busy.
    """
    slot = get_session().requests.slot(name)
    generation = slot.begin()
    if generation is None:
        logger.info(f"Advisor {name} rejected: request already in flight")
        return None

    result = None
    try:
        result = call()
    finally:
        is_latest = slot.finish(generation, result)
    return result, is_latest


def _busy():
    return make_error_response("CONFLICT", NOTICE_ADVISOR_BUSY, status_code=409)


@advisor_bp.route('/ask', methods=['POST'])
def ask():
    """
    Request body: {"question": "..."}

    Returns:
        {"data": {"answer": "...", "stale": false}}
    """
    body = request.get_json(silent=True) or {}
    question = _required_text(body, "question")
    catalog = get_session().catalog
    context = build_advisory_context(catalog.all())

    outcome = _run_in_slot('ask', lambda: _advisory_service().ask(question, context))
    if outcome is None:
        return _busy()

    answer, is_latest = outcome
    return jsonify(success_envelope({"answer": answer, "stale": not is_latest}))


@advisor_bp.route('/monitor', methods=['POST'])
def monitor():
    """
    Digest of admissions news for every monitored school.

    With nothing monitored the request is a rejected no-op (no model call).
    """
    session = get_session()
    schools = session.catalog.resolve(session.state.monitored_ids)
    if not schools:
        return jsonify(success_envelope({
            "accepted": False,
            "notice": NOTICE_MONITOR_EMPTY,
            "report": None,
            "failed": False,
        }))

    names = [f"{s.name} ({s.name_zh})" if s.name_zh else s.name for s in schools]
    outcome = _run_in_slot('monitor', lambda: _advisory_service().monitor(names))
    if outcome is None:
        return _busy()

    report, is_latest = outcome
    return jsonify(success_envelope({
        "accepted": True,
        "notice": None,
        "report": report if report is not None else ADVISOR_FALLBACK,
        "failed": report is None,
        "stale": not is_latest,
    }, meta={"schoolCount": len(schools)}))


@advisor_bp.route('/lookup', methods=['POST'])
def lookup():
    """
    Request body:
    {
        "name": "Diocesan Boys' School",
        "form": {"name": "...", "district": "..."}   // optional, current form
    }

    Returns the form merged with whatever the lookup found. On failure the
    form comes back unchanged with a notice to fill it in by hand.
    """
    body = request.get_json(silent=True) or {}
    name = _required_text(body, "name")
    form = body.get("form") or {}
    if not isinstance(form, dict):
        raise ValidationError("form must be an object", field="form", received_value=form)

    outcome = _run_in_slot('lookup', lambda: _advisory_service().lookup(name))
    if outcome is None:
        return _busy()

    result, is_latest = outcome
    found = result is not None
    if not found:
        logger.info(f"Lookup found nothing usable for {name!r}")
    return jsonify(success_envelope({
        "found": found,
        "notice": None if found else NOTICE_LOOKUP_FAILED,
        "fields": result.present_fields() if found else {},
        "draft": prefill_draft(form, result),
        "stale": not is_latest,
    }))


@advisor_bp.route('/health', methods=['GET'])
def health():
    """Advisor configuration check (no model call)."""
    service = _advisory_service()
    requests = get_session().requests
    return jsonify(success_envelope({
        "configured": service.configured,
        "model": service.model,
        "webSearch": Config.AI_WEB_SEARCH,
        "inFlight": {
            name: requests.slot(name).in_flight for name in ('ask', 'monitor', 'lookup')
        },
    }))
