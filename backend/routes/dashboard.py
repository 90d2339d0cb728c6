"""
Dashboard API Route

GET /api/dashboard - Upcoming deadlines, progress funnel and interview
stage for the followed schools. Followed ids no longer in the catalog are
skipped.
"""

import logging

from flask import Blueprint, jsonify

from api.serializers import serialize_dashboard, success_envelope
from services.dashboard_service import build_dashboard
from services.session import get_session, request_today

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route("/dashboard", methods=["GET"])
def get_dashboard():
    session = get_session()
    state = session.state
    followed = session.catalog.resolve(state.followed_ids)
    dashboard = build_dashboard(followed, state.progress, request_today())
    return jsonify(success_envelope(serialize_dashboard(dashboard)))
