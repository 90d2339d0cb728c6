"""
Catalog Service - Built-in schools unioned with user-added schools

The base set is loaded once and never changes. Custom schools only grow
by append (no edit or delete). Catalog order is base order followed by
custom order; the filter engine relies on it for stable sorting.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from models.school import School

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_base_schools() -> Tuple[School, ...]:
    """Load the built-in catalog once per process."""
    from data.schools import load_base_schools

    schools = tuple(load_base_schools())
    logger.info(f"Loaded {len(schools)} built-in schools")
    return schools


class Catalog:
    """Read-only view over base + custom schools."""

    def __init__(self, base: Iterable[School], custom: Iterable[School] = ()):
        self._base = tuple(base)
        self._custom = tuple(custom)
        self._schools = self._base + self._custom
        self._by_id: Dict[str, School] = {s.id: s for s in self._schools}
        self._custom_ids = frozenset(s.id for s in self._custom)

    def __len__(self) -> int:
        return len(self._schools)

    def __iter__(self):
        return iter(self._schools)

    def all(self) -> List[School]:
        return list(self._schools)

    def get(self, school_id: str) -> Optional[School]:
        return self._by_id.get(school_id)

    def contains(self, school_id: str) -> bool:
        return school_id in self._by_id

    def is_custom(self, school_id: str) -> bool:
        return school_id in self._custom_ids

    def ids(self) -> frozenset:
        return frozenset(self._by_id)

    def resolve(self, ids: Iterable[str]) -> List[School]:
        """Schools for the given ids in the given order, skipping unknown ids."""
        return [self._by_id[i] for i in ids if i in self._by_id]

    def with_custom(self, custom: Iterable[School]) -> 'Catalog':
        return Catalog(self._base, custom)
