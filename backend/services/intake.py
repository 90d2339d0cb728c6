"""
Intake Service - Add a custom school

- prefill_draft(): merge a model lookup into the form fields the user has
  typed so far, field by field. Fields the lookup did not return keep the
  user's value.
- build_custom_school(): turn a validated draft into a School with a
  fresh id and the next ranking.

Custom ids are "custom-<epoch ms>", suffixed until they collide with no
existing catalog id.
"""

import logging
import time
from typing import Any, Dict, Optional

from constants import CUSTOM_INTERVIEW_REQUIREMENTS, CUSTOM_INTERVIEW_TIPS
from models.school import School
from schemas.school import LookupResult, SchoolDraft
from services.catalog import Catalog

logger = logging.getLogger(__name__)


def prefill_draft(form_fields: Dict[str, Any], lookup: Optional[LookupResult]) -> Dict[str, Any]:
    """Form fields after applying a lookup. A failed lookup changes nothing."""
    merged = dict(form_fields or {})
    if lookup is None:
        return merged
    for key, value in lookup.present_fields().items():
        merged[key] = value
    return merged


def new_custom_id(existing_ids, now_ms: Optional[int] = None) -> str:
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    candidate = f"custom-{now_ms}"
    suffix = 1
    while candidate in existing_ids:
        candidate = f"custom-{now_ms}-{suffix}"
        suffix += 1
    return candidate


def build_custom_school(draft: SchoolDraft, catalog: Catalog,
                        now_ms: Optional[int] = None) -> School:
    """
    Create the School for a submitted intake form.

    Ranking is placed after every existing school (catalog size + 1).
    """
    school = School(
        id=new_custom_id(catalog.ids(), now_ms),
        name=draft.name,
        name_zh=draft.name_zh,
        location=draft.location,
        district=draft.district,
        tuition_fee=draft.tuition_fee,
        curriculum=tuple(draft.curriculum),
        language=tuple(draft.language),
        type=draft.school_type,
        ranking=len(catalog) + 1,
        application_start=draft.application_start,
        application_end=draft.application_end,
        interview_date=draft.interview_date,
        description=draft.description,
        website=draft.website,
        interview_requirements=CUSTOM_INTERVIEW_REQUIREMENTS,
        interview_tips=CUSTOM_INTERVIEW_TIPS,
    )
    logger.info(f"Custom school created: {school.id} ({school.name})")
    return school
