"""
Tests for the custom school intake: schemas/school.py and services/intake.py
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from constants import (
    CUSTOM_INTERVIEW_REQUIREMENTS,
    CUSTOM_INTERVIEW_TIPS,
    Curriculum,
    SchoolType,
)
from schemas.school import LookupResult, SchoolDraft
from services.catalog import Catalog
from services.intake import build_custom_school, new_custom_id, prefill_draft


@pytest.fixture
def draft_body():
    return {
        "name": "Kellett School",
        "nameZh": "啟歷學校",
        "district": "Southern (南區)",
        "tuitionFee": "HK$180,000 / yr",
        "type": "International",
        "curriculum": ["British (A-Level)", "Waldorf"],
        "language": ["English", "", 3],
        "applicationEnd": "2024-11-30",
    }


class TestSchoolDraft:
    """Form validation"""

    def test_valid_draft(self, draft_body):
        draft = SchoolDraft.model_validate(draft_body)
        assert draft.name == "Kellett School"
        assert draft.school_type == SchoolType.INTERNATIONAL
        assert draft.curriculum == [Curriculum.BRITISH]
        assert draft.language == ["English"]

    def test_type_defaults_to_private(self, draft_body):
        del draft_body["type"]
        assert SchoolDraft.model_validate(draft_body).school_type == SchoolType.PRIVATE

    def test_unknown_type_rejected(self, draft_body):
        draft_body["type"] = "Boarding"
        with pytest.raises(PydanticValidationError):
            SchoolDraft.model_validate(draft_body)

    @pytest.mark.parametrize("deadline", [None, "", "30/11/2024"])
    def test_deadline_required(self, draft_body, deadline):
        draft_body["applicationEnd"] = deadline
        with pytest.raises(PydanticValidationError):
            SchoolDraft.model_validate(draft_body)

    def test_name_required(self, draft_body):
        draft_body["name"] = "   "
        with pytest.raises(PydanticValidationError):
            SchoolDraft.model_validate(draft_body)


class TestPrefill:
    """prefill_draft()"""

    def test_lookup_overrides_present_fields_only(self):
        form = {"name": "Kellett", "district": "Mine", "website": "https://typed.hk"}
        lookup = LookupResult.model_validate({
            "nameZh": "啟歷學校",
            "district": "Southern (南區)",
            "curriculum": ["British (A-Level)"],
        })
        merged = prefill_draft(form, lookup)
        assert merged["name"] == "Kellett"
        assert merged["district"] == "Southern (南區)"
        assert merged["nameZh"] == "啟歷學校"
        assert merged["website"] == "https://typed.hk"
        assert merged["curriculum"] == ["British (A-Level)"]

    def test_failed_lookup_changes_nothing(self):
        form = {"name": "Kellett"}
        merged = prefill_draft(form, None)
        assert merged == form
        assert merged is not form


class TestBuildCustomSchool:
    """build_custom_school() and new_custom_id()"""

    def test_ids_unique(self):
        assert new_custom_id(set(), now_ms=1700000000000) == "custom-1700000000000"
        existing = {"custom-1700000000000", "custom-1700000000000-1"}
        assert new_custom_id(existing, now_ms=1700000000000) == "custom-1700000000000-2"

    def test_school_built_from_draft(self, draft_body, make_school):
        catalog = Catalog([make_school(id="a"), make_school(id="b")])
        draft = SchoolDraft.model_validate(draft_body)

        school = build_custom_school(draft, catalog, now_ms=42)

        assert school.id == "custom-42"
        assert school.ranking == 3
        assert school.name_zh == "啟歷學校"
        assert school.curriculum == (Curriculum.BRITISH,)
        assert school.interview_requirements == CUSTOM_INTERVIEW_REQUIREMENTS
        assert school.interview_tips == CUSTOM_INTERVIEW_TIPS
        assert school.deadline.isoformat() == "2024-11-30"
