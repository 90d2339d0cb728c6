"""
Pydantic model for school list filters.

Used by:
    GET /api/schools
    GET /api/schools/export
    GET /api/districts

Every dimension is optional. "All" or an empty value means no constraint.
Enum dimensions are validated; district and language are free text and
matched exactly by the filter engine.
"""

from typing import Optional

from pydantic import Field, field_validator

from constants import FILTER_ALL, Curriculum, SchoolType, SortKey
from utils.normalize import to_enum

from .base import BaseParamsModel


def _none_if_all(v):
    if v is None:
        return None
    if isinstance(v, str) and (v.strip() == '' or v.strip() == FILTER_ALL):
        return None
    return v


class FilterParams(BaseParamsModel):
    """
    Usage:
        params = FilterParams(**request.args.to_dict())
        schools = filter_schools(catalog.all(), params)
    """
    curriculum: Optional[Curriculum] = None
    school_type: Optional[SchoolType] = Field(default=None, alias='type')
    district: Optional[str] = None
    language: Optional[str] = None
    search: Optional[str] = None
    sort: SortKey = SortKey.RANK

    @field_validator('curriculum', mode='before')
    @classmethod
    def normalize_curriculum(cls, v):
        v = _none_if_all(v)
        return to_enum(v, Curriculum, field='curriculum') if v is not None else None

    @field_validator('school_type', mode='before')
    @classmethod
    def normalize_school_type(cls, v):
        v = _none_if_all(v)
        return to_enum(v, SchoolType, field='type') if v is not None else None

    @field_validator('district', 'language', mode='before')
    @classmethod
    def normalize_choice(cls, v):
        return _none_if_all(v)

    @field_validator('search', mode='before')
    @classmethod
    def normalize_search(cls, v):
        # Search text is not trimmed of "All"; only empty means no search
        if v is None or v == '':
            return None
        return v

    @field_validator('sort', mode='before')
    @classmethod
    def normalize_sort(cls, v):
        if v is None or v == '':
            return SortKey.RANK
        return to_enum(v, SortKey, field='sort')

    @property
    def has_curriculum_tab(self) -> bool:
        return self.curriculum is not None
