"""
Pydantic models for the intake form.

SchoolDraft:   the form a user submits to add a custom school
LookupResult:  the partial record returned by the model lookup

Both use the camelCase keys of the front-end contract. Unknown enum
values are never stored: the draft rejects an unknown type, the lookup
result drops unknown curriculum values and an unknown type.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, ValidationError as PydanticValidationError, field_validator

from constants import Curriculum, SchoolType
from utils.normalize import ValidationError, to_date, to_enum

from .base import BaseParamsModel


def _known_curricula(values) -> List[Curriculum]:
    if not isinstance(values, list):
        return []
    known = []
    for value in values:
        try:
            curriculum = to_enum(value, Curriculum)
        except ValidationError:
            continue
        if curriculum is not None and curriculum not in known:
            known.append(curriculum)
    return known


def _string_list(values) -> List[str]:
    if not isinstance(values, list):
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


class SchoolDraft(BaseParamsModel):
    """
    Intake form submission.

    Usage:
        draft = SchoolDraft.model_validate(request.get_json())
        school, result = get_session().add_school(draft)
    """
    name: str = Field(min_length=1)
    name_zh: str = Field(default='', alias='nameZh')
    location: str = ''
    district: str = ''
    tuition_fee: str = Field(default='', alias='tuitionFee')
    school_type: SchoolType = Field(default=SchoolType.PRIVATE, alias='type')
    curriculum: List[Curriculum] = Field(default_factory=list)
    language: List[str] = Field(default_factory=list)
    application_start: str = Field(default='', alias='applicationStart')
    application_end: str = Field(alias='applicationEnd')
    interview_date: str = Field(default='', alias='interviewDate')
    website: str = ''
    description: str = ''

    @field_validator('school_type', mode='before')
    @classmethod
    def normalize_type(cls, v):
        if v is None or v == '':
            return SchoolType.PRIVATE
        return to_enum(v, SchoolType, field='type')

    @field_validator('curriculum', mode='before')
    @classmethod
    def normalize_curriculum(cls, v):
        return _known_curricula(v)

    @field_validator('language', mode='before')
    @classmethod
    def normalize_language(cls, v):
        return _string_list(v)

    @field_validator('application_end', mode='before')
    @classmethod
    def normalize_deadline(cls, v):
        # Deadline sort and countdowns need a real date
        parsed = to_date(v, field='applicationEnd')
        if parsed is None:
            raise ValidationError("applicationEnd is required", field='applicationEnd')
        return parsed.isoformat()

    @field_validator('application_start', mode='before')
    @classmethod
    def normalize_start(cls, v):
        parsed = to_date(v, field='applicationStart')
        return parsed.isoformat() if parsed else ''


class LookupResult(BaseParamsModel):
    """
    Partial school record from the model lookup. Every field may be absent.

    Usage:
        result = LookupResult.from_payload(json.loads(text))
        fields = result.present_fields()
    """
    name: Optional[str] = None
    name_zh: Optional[str] = Field(default=None, alias='nameZh')
    location: Optional[str] = None
    district: Optional[str] = None
    tuition_fee: Optional[str] = Field(default=None, alias='tuitionFee')
    school_type: Optional[SchoolType] = Field(default=None, alias='type')
    curriculum: Optional[List[Curriculum]] = None
    language: Optional[List[str]] = None
    application_start: Optional[str] = Field(default=None, alias='applicationStart')
    application_end: Optional[str] = Field(default=None, alias='applicationEnd')
    interview_date: Optional[str] = Field(default=None, alias='interviewDate')
    website: Optional[str] = None
    description: Optional[str] = None

    @field_validator(
        'name', 'name_zh', 'location', 'district', 'tuition_fee',
        'interview_date', 'website', 'description',
        mode='before',
    )
    @classmethod
    def text_or_none(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator('school_type', mode='before')
    @classmethod
    def known_type_or_none(cls, v):
        try:
            return to_enum(v, SchoolType) if isinstance(v, str) else None
        except ValidationError:
            return None

    @field_validator('curriculum', mode='before')
    @classmethod
    def known_curricula(cls, v):
        return _known_curricula(v) if v is not None else None

    @field_validator('language', mode='before')
    @classmethod
    def languages(cls, v):
        return _string_list(v) if v is not None else None

    @field_validator('application_start', 'application_end', mode='before')
    @classmethod
    def iso_date_or_none(cls, v):
        try:
            parsed = to_date(v) if isinstance(v, str) else None
        except ValidationError:
            return None
        return parsed.isoformat() if parsed else None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> Optional['LookupResult']:
        try:
            return cls.model_validate(payload)
        except PydanticValidationError:
            return None

    def present_fields(self) -> Dict[str, Any]:
        """camelCase dict of the fields the lookup actually returned."""
        data = self.model_dump(by_alias=True, exclude_none=True, mode='json')
        return data
