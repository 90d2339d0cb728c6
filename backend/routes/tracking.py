"""
Tracking API Routes - Follow, monitor, compare, progress and notes

Endpoints:
- GET    /api/state                   - Current tracker overlay
- POST   /api/follow/<school_id>      - Toggle follow
- POST   /api/monitor/<school_id>     - Toggle monitor
- POST   /api/compare/<school_id>     - Toggle compare (max 3)
- DELETE /api/compare/<school_id>     - Remove from compare
- GET    /api/compare                 - Comparison matrix
- PUT    /api/progress/<school_id>    - Set application status
- PUT    /api/notes/<school_id>       - Commit a note

Every mutation responds with the outcome envelope:
    {"data": {"accepted", "notice", "persisted", "state"}, "meta": {...}}

A rejected intent (adding a 4th school to compare) is a 200 with
accepted=false and a notice; the state is unchanged.
"""

import logging

from flask import Blueprint, jsonify, request

from api.serializers import comparison_matrix, outcome_envelope, serialize_state, success_envelope
from constants import ProgressStatus
from routes.schools import school_not_found
from services.session import get_session
from services.tracker_state import (
    commit_note,
    remove_compare,
    set_progress,
    toggle_compare,
    toggle_follow,
    toggle_monitor,
)
from utils.normalize import ValidationError, to_enum

logger = logging.getLogger(__name__)

tracking_bp = Blueprint('tracking', __name__)


def _dispatch(school_id: str, transition_fn, *args):
    session = get_session()
    if not session.catalog.contains(school_id):
        return school_not_found(school_id)

    result = session.dispatch(transition_fn, school_id, *args)
    if not result.accepted:
        logger.info(f"{transition_fn.__name__}({school_id}) rejected: {result.notice}")
    return jsonify(outcome_envelope(result, serialize_state(result.state)))


@tracking_bp.route("/state", methods=["GET"])
def get_state():
    return jsonify(success_envelope(serialize_state(get_session().state)))


@tracking_bp.route("/follow/<school_id>", methods=["POST"])
def follow(school_id: str):
    return _dispatch(school_id, toggle_follow)


@tracking_bp.route("/monitor/<school_id>", methods=["POST"])
def monitor(school_id: str):
    return _dispatch(school_id, toggle_monitor)


@tracking_bp.route("/compare/<school_id>", methods=["POST"])
def compare(school_id: str):
    return _dispatch(school_id, toggle_compare)


@tracking_bp.route("/compare/<school_id>", methods=["DELETE"])
def uncompare(school_id: str):
    return _dispatch(school_id, remove_compare)


@tracking_bp.route("/compare", methods=["GET"])
def get_comparison():
    """Feature rows for the compared schools, in the order they were added."""
    session = get_session()
    schools = session.catalog.resolve(session.state.compared_ids)
    return jsonify(success_envelope(comparison_matrix(schools), meta={"count": len(schools)}))


@tracking_bp.route("/progress/<school_id>", methods=["PUT"])
def update_progress(school_id: str):
    """
    Request body: {"status": "interviewing"}

    Any status may follow any other.
    """
    body = request.get_json(silent=True) or {}
    status = to_enum(body.get("status"), ProgressStatus, field="status")
    if status is None:
        raise ValidationError("status is required", field="status")
    return _dispatch(school_id, set_progress, status)


@tracking_bp.route("/notes/<school_id>", methods=["PUT"])
def update_note(school_id: str):
    """
    Request body: {"note": "..."}

    Longer notes are cut to the note limit; an empty note removes the entry.
    """
    body = request.get_json(silent=True) or {}
    note = body.get("note", "")
    if note is None:
        note = ""
    if not isinstance(note, str):
        raise ValidationError("note must be a string", field="note", received_value=note)
    return _dispatch(school_id, commit_note, note)
