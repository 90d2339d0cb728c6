"""
School Model - Immutable catalog record

Built-in schools come from data/schools.py; custom schools are appended
through the intake form and persisted as a list of dicts.

Fields mirror the front-end contract (camelCase on the wire):
- id: stable unique key, joins every per-user overlay
- curriculum: any of Curriculum (a school may offer several)
- type: exactly one SchoolType
- ranking: overall rank, lower is better
- applicationEnd: ISO date driving deadline sort and countdowns
- interviewDate: free-text window, not parseable
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from constants import Curriculum, SchoolType
from utils.normalize import ValidationError, to_date, to_enum


@dataclass(frozen=True)
class School:
    id: str
    name: str
    name_zh: str
    location: str
    district: str
    tuition_fee: str
    curriculum: Tuple[Curriculum, ...]
    language: Tuple[str, ...]
    type: SchoolType
    ranking: int
    application_start: str
    application_end: str
    interview_date: str
    description: str = ''
    website: str = ''
    interview_requirements: str = ''
    interview_tips: str = ''
    category_ranking: Optional[int] = None

    # Parsed once, used by deadline sort and countdowns
    deadline: date = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        deadline = to_date(self.application_end, field='applicationEnd')
        if deadline is None:
            raise ValidationError("applicationEnd is required", field='applicationEnd')
        object.__setattr__(self, 'deadline', deadline)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'School':
        """
        Build a School from its camelCase dict form.

        Raises:
            ValidationError: on a missing key, a wrongly typed field or an
                unknown enum value
        """
        if not isinstance(data, dict):
            raise ValidationError("Expected a school record", received_value=data)
        try:
            return cls(
                id=_text(data, 'id'),
                name=_text(data, 'name'),
                name_zh=_text(data, 'nameZh'),
                location=_text(data, 'location'),
                district=_text(data, 'district'),
                tuition_fee=_text(data, 'tuitionFee'),
                curriculum=tuple(
                    to_enum(c, Curriculum, field='curriculum')
                    for c in _text_list(data, 'curriculum')
                ),
                language=_text_list(data, 'language'),
                type=to_enum(_text(data, 'type'), SchoolType, field='type'),
                ranking=_positive_int(data, 'ranking'),
                category_ranking=(
                    _positive_int(data, 'categoryRanking')
                    if data.get('categoryRanking') is not None else None
                ),
                application_start=_text(data, 'applicationStart'),
                application_end=_text(data, 'applicationEnd'),
                interview_date=_text(data, 'interviewDate'),
                description=_text(data, 'description', ''),
                website=_text(data, 'website', ''),
                interview_requirements=_text(data, 'interviewRequirements', ''),
                interview_tips=_text(data, 'interviewTips', ''),
            )
        except KeyError as e:
            raise ValidationError(f"School record missing field {e}", field=str(e.args[0]))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'id': self.id,
            'name': self.name,
            'nameZh': self.name_zh,
            'location': self.location,
            'district': self.district,
            'tuitionFee': self.tuition_fee,
            'curriculum': [c.value for c in self.curriculum],
            'language': list(self.language),
            'type': self.type.value,
            'ranking': self.ranking,
            'applicationStart': self.application_start,
            'applicationEnd': self.application_end,
            'interviewDate': self.interview_date,
            'description': self.description,
            'website': self.website,
            'interviewRequirements': self.interview_requirements,
            'interviewTips': self.interview_tips,
        }
        if self.category_ranking is not None:
            result['categoryRanking'] = self.category_ranking
        return result

    def __repr__(self):
        return f"<School {self.id} #{self.ranking}>"


_MISSING = object()


def _text(data: Dict[str, Any], key: str, default: Any = _MISSING) -> str:
    value = data[key] if default is _MISSING else data.get(key, default)
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string", field=key, received_value=value)
    return value


def _text_list(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{key} must be a list of strings", field=key, received_value=value)
    return tuple(value)


def _positive_int(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{key} must be a positive integer", field=key, received_value=value)
    return value
