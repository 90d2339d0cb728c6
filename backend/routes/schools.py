"""
Schools API Routes - Catalog browsing, export and custom schools

Endpoints:
- GET  /api/schools                 - Filtered, sorted school cards
- GET  /api/schools/<school_id>     - One school card
- GET  /api/schools/export          - .xlsx of the filtered list
- POST /api/schools                 - Add a custom school
- GET  /api/filter-options          - Values for the filter dropdowns
- GET  /api/districts               - District explorer groups

List endpoints accept the same query params:
    curriculum, type, district, language, search, sort
"""

import logging
import time

from flask import Blueprint, jsonify, request, send_file

from api.middleware.error_envelope import make_error_response
from api.serializers import (
    outcome_envelope,
    serialize_card,
    serialize_cards,
    serialize_districts,
    serialize_state,
    success_envelope,
)
from schemas.filters import FilterParams
from schemas.school import SchoolDraft
from services.export_service import XLSX_MIMETYPE, export_filename, export_workbook
from services.filter_engine import filter_options, filter_schools, group_by_district
from services.session import get_session, request_today

logger = logging.getLogger(__name__)

schools_bp = Blueprint('schools', __name__)


def _filter_params() -> FilterParams:
    # pydantic errors are turned into INVALID_PARAMS by the error handlers
    return FilterParams.model_validate(request.args.to_dict())


def _filters_meta(params: FilterParams) -> dict:
    return params.model_dump(by_alias=True, exclude_none=True, mode='json')


def school_not_found(school_id: str):
    return make_error_response("NOT_FOUND", f"Unknown school: {school_id}", field="schoolId")


@schools_bp.route("/schools", methods=["GET"])
def list_schools():
    """
    Filtered and sorted school cards.

    Returns:
        {"data": [card, ...], "meta": {"count": 12, "total": 100, "filters": {...}}}
    """
    start = time.perf_counter()
    params = _filter_params()
    session = get_session()
    catalog = session.catalog

    schools = filter_schools(catalog.all(), params)
    cards = serialize_cards(
        schools, session.state, catalog, request_today(),
        show_category_rank=params.has_curriculum_tab,
    )

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug(f"GET /api/schools matched {len(cards)}/{len(catalog)} in {elapsed_ms:.1f}ms")
    return jsonify(success_envelope(cards, meta={
        "count": len(cards),
        "total": len(catalog),
        "filters": _filters_meta(params),
    }))


@schools_bp.route("/schools/<school_id>", methods=["GET"])
def get_school(school_id: str):
    session = get_session()
    school = session.catalog.get(school_id)
    if school is None:
        return school_not_found(school_id)
    return jsonify(success_envelope(
        serialize_card(school, session.state, session.catalog, request_today())
    ))


@schools_bp.route("/schools/export", methods=["GET"])
def export_schools():
    """Download the currently filtered list, in display order, as .xlsx."""
    params = _filter_params()
    schools = filter_schools(get_session().catalog.all(), params)
    filename = export_filename(request_today())
    logger.info(f"Exporting {len(schools)} schools to {filename}")
    return send_file(
        export_workbook(schools),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=filename,
    )


@schools_bp.route("/schools", methods=["POST"])
def create_school():
    """
    Add a custom school from the intake form.

    Request body: SchoolDraft fields (camelCase). Returns 201 with the new
    card and the updated tracker state.
    """
    draft = SchoolDraft.model_validate(request.get_json(silent=True) or {})
    session = get_session()
    school, result = session.add_school(draft)

    card = serialize_card(school, result.state, session.catalog, request_today())
    return jsonify(outcome_envelope(result, serialize_state(result.state), school=card)), 201


@schools_bp.route("/filter-options", methods=["GET"])
def get_filter_options():
    return jsonify(success_envelope(filter_options(get_session().catalog.all())))


@schools_bp.route("/districts", methods=["GET"])
def list_districts():
    """District explorer over the filtered list."""
    params = _filter_params()
    session = get_session()
    groups = group_by_district(filter_schools(session.catalog.all(), params))
    return jsonify(success_envelope(
        serialize_districts(groups, session.state),
        meta={"districtCount": len(groups), "filters": _filters_meta(params)},
    ))
