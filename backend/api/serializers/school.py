"""
School and tracker serializers.

Turns School records plus the tracker overlay into the JSON views the
front end renders:

    serialize_card()        one list/detail card with derived flags
    serialize_state()       followed/monitored/compared ids, progress, notes
    comparison_matrix()     fixed feature rows across the compare set
    serialize_dashboard()   dashboard panels with schools expanded
    serialize_districts()   district explorer groups
"""

from datetime import date
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote_plus

from constants import URGENT_DAYS
from models.school import School
from services.catalog import Catalog
from services.dashboard_service import days_remaining
from services.tracker_state import TrackerState

MAP_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="

# (key, label) rows of the comparison table, in display order
COMPARISON_FEATURES = [
    ('ranking', '综合排名'),
    ('district', '所属区域'),
    ('type', '学校类型'),
    ('tuitionFee', '每年学费'),
    ('curriculum', '课程体系'),
    ('interviewDate', '面试窗口'),
]


def map_url(school: School) -> str:
    return MAP_SEARCH_URL + quote_plus(f"{school.name} {school.location} Hong Kong")


def serialize_card(
    school: School,
    state: TrackerState,
    catalog: Catalog,
    today: date,
    show_category_rank: bool = False,
) -> Dict[str, Any]:
    """School fields plus the per-user overlay and deadline countdown."""
    days_left = days_remaining(school, today)
    progress = state.progress.get(school.id)
    card = school.to_dict()
    card.update({
        'daysLeft': days_left,
        'deadlinePassed': days_left < 0,
        'urgent': 0 <= days_left < URGENT_DAYS,
        'isFollowing': state.is_following(school.id),
        'isMonitored': state.is_monitored(school.id),
        'isCompared': state.is_compared(school.id),
        'isCustom': catalog.is_custom(school.id),
        'progress': progress.value if progress is not None else None,
        'note': state.notes.get(school.id, ''),
        'mapUrl': map_url(school),
        'showCategoryRank': show_category_rank and school.category_ranking is not None,
    })
    return card


def serialize_cards(schools: Sequence[School], state: TrackerState, catalog: Catalog,
                    today: date, show_category_rank: bool = False) -> List[Dict[str, Any]]:
    return [serialize_card(s, state, catalog, today, show_category_rank) for s in schools]


def serialize_state(state: TrackerState) -> Dict[str, Any]:
    return {
        'followed': list(state.followed_ids),
        'monitored': list(state.monitored_ids),
        'compared': list(state.compared_ids),
        'progress': {k: v.value for k, v in state.progress.items()},
        'notes': dict(state.notes),
        'customSchools': [s.id for s in state.custom_schools],
    }


def _feature_value(school: School, key: str) -> Any:
    value = school.to_dict()[key]
    if isinstance(value, list):
        return ", ".join(value)
    return value


def comparison_matrix(schools: Sequence[School]) -> Dict[str, Any]:
    """
    Rows of the comparison table.

    Each row carries one value per compared school, in compare-set order.
    """
    return {
        'schools': [
            {'id': s.id, 'name': s.name, 'nameZh': s.name_zh} for s in schools
        ],
        'rows': [
            {
                'feature': key,
                'label': label,
                'values': [_feature_value(s, key) for s in schools],
            }
            for key, label in COMPARISON_FEATURES
        ],
    }


def _brief(school: School) -> Dict[str, Any]:
    return {
        'id': school.id,
        'name': school.name,
        'nameZh': school.name_zh,
        'applicationEnd': school.application_end,
        'interviewDate': school.interview_date,
    }


def serialize_dashboard(dashboard: Dict[str, Any]) -> Dict[str, Any]:
    upcoming = dashboard['upcoming']
    interviewing = dashboard['interviewing']
    return {
        **dashboard,
        'upcoming': {
            **upcoming,
            'entries': [
                {**entry, 'school': _brief(entry['school'])}
                for entry in upcoming['entries']
            ],
        },
        'interviewing': {
            **interviewing,
            'schools': [_brief(s) for s in interviewing['schools']],
        },
    }


def serialize_districts(groups: List[Dict[str, Any]],
                        state: Optional[TrackerState] = None) -> List[Dict[str, Any]]:
    return [
        {
            **group,
            'schools': [
                {
                    **_brief(s),
                    'ranking': s.ranking,
                    'isFollowing': state.is_following(s.id) if state else False,
                }
                for s in group['schools']
            ],
        }
        for group in groups
    ]
