"""
Filter Engine - Derive the displayed school list

Pure functions over the catalog. Nothing here mutates its inputs or keeps
state, so calling any function twice with the same inputs gives the same
output.

Filters (all optional, combined with AND):
- curriculum: school offers the selected curriculum
- school_type: exact match on type
- district: exact match on the district string (including the
  parenthesised Chinese suffix)
- language: school teaches in the selected language
- search: see matches_search()

Sort:
- rank: ascending ranking
- deadline: ascending applicationEnd
Python's sorted() is stable, so equal keys keep catalog order.

Usage:
    from services.filter_engine import filter_schools
    from schemas.filters import FilterParams

    shown = filter_schools(catalog.all(), FilterParams(curriculum='IB', sort='deadline'))
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Sequence

from constants import DISTRICT_PREVIEW_LIMIT, Curriculum, SchoolType, SortKey
from models.school import School
from schemas.filters import FilterParams


def matches_search(school: School, term: str) -> bool:
    """
    Free-text match.

    Latin-script fields (name, location, district) compare against the
    lower-cased term; the Chinese name compares against the raw term.
    A term equal to the school id (any case) also matches, so the
    common abbreviations used as ids ("dbs", "spcc") find their school.
    """
    lowered = term.lower()
    return (
        lowered == school.id.lower()
        or lowered in school.name.lower()
        or term in school.name_zh
        or lowered in school.location.lower()
        or lowered in school.district.lower()
    )


def _passes(school: School, params: FilterParams) -> bool:
    if params.curriculum is not None and params.curriculum not in school.curriculum:
        return False
    if params.school_type is not None and school.type != params.school_type:
        return False
    if params.language is not None and params.language not in school.language:
        return False
    if params.district is not None and school.district != params.district:
        return False
    if params.search and not matches_search(school, params.search):
        return False
    return True


def sort_schools(schools: Iterable[School], sort: SortKey = SortKey.RANK) -> List[School]:
    if SortKey(sort) == SortKey.DEADLINE:
        return sorted(schools, key=lambda s: s.deadline)
    return sorted(schools, key=lambda s: s.ranking)


def filter_schools(schools: Sequence[School], params: FilterParams) -> List[School]:
    """Apply every active filter, then sort. Returns a new list."""
    return sort_schools((s for s in schools if _passes(s, params)), params.sort)


def filter_options(schools: Iterable[School]) -> Dict[str, List[str]]:
    """Dropdown values for the filter bar."""
    schools = list(schools)
    districts = sorted({s.district for s in schools})
    languages = sorted({lang for s in schools for lang in s.language})
    return {
        'curricula': [c.value for c in Curriculum],
        'types': [t.value for t in SchoolType],
        'districts': districts,
        'languages': languages,
        'sorts': [k.value for k in SortKey],
    }


def group_by_district(
    schools: Iterable[School],
    preview: int = DISTRICT_PREVIEW_LIMIT,
) -> List[Dict]:
    """
    District explorer: one group per district, districts sorted by name.

    Each group keeps the input order of its schools and exposes the first
    `preview` of them.
    """
    grouped: Dict[str, List[School]] = OrderedDict()
    for school in schools:
        grouped.setdefault(school.district, []).append(school)

    return [
        {
            'district': district,
            'count': len(grouped[district]),
            'schools': grouped[district][:preview],
            'hasMore': len(grouped[district]) > preview,
        }
        for district in sorted(grouped)
    ]
