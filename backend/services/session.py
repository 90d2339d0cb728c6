"""
Tracker Session - Holds the current state and runs the persistence effect

One session per app process (single local user). Startup loads every
slice once; afterwards each user intent goes through dispatch():

    1. run the pure transition from services.tracker_state
    2. swap in the new state (and catalog, when custom schools changed)
    3. rewrite every dirty slice in full

Mutations are serialized by a lock so each one finishes, including its
writes, before the next starts.
"""

import logging
import threading
from datetime import date
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from flask import current_app

from constants import CUSTOM_SCHOOLS_KEY, SLICE_KEYS
from models.school import School
from services.catalog import Catalog
from services.intake import build_custom_school
from services.request_tracker import RequestTracker
from services.storage import SliceStore, decode_slices, encode_slice
from services.tracker_state import (
    Transition,
    TrackerState,
    add_custom_school,
    state_from_slices,
)
from utils.normalize import to_date

logger = logging.getLogger(__name__)

ADVISOR_CALL_SITES = ('ask', 'monitor', 'lookup')


@dataclass(frozen=True)
class DispatchResult:
    transition: Transition
    persisted: bool

    @property
    def state(self) -> TrackerState:
        return self.transition.state

    @property
    def accepted(self) -> bool:
        return self.transition.accepted

    @property
    def notice(self):
        return self.transition.notice


class TrackerSession:

    def __init__(self, base_schools: Iterable[School], store_factory: Callable[[], SliceStore]):
        self._base = tuple(base_schools)
        self._store_factory = store_factory
        self._lock = threading.RLock()
        self._state = TrackerState()
        self._catalog = Catalog(self._base)
        self.requests = RequestTracker(*ADVISOR_CALL_SITES)

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def load(self) -> TrackerState:
        """Read every slice once. Missing or corrupt slices start empty."""
        with self._lock:
            store = self._store_factory()
            raw = {key: store.load(key) for key in SLICE_KEYS}
            self._state = state_from_slices(decode_slices(raw))
            self._catalog = Catalog(self._base, self._state.custom_schools)
            logger.info(
                f"Tracker state loaded: followed={len(self._state.followed_ids)} "
                f"monitored={len(self._state.monitored_ids)} "
                f"custom={len(self._state.custom_schools)}"
            )
            return self._state

    def dispatch(self, transition_fn: Callable[..., Transition], *args) -> DispatchResult:
        with self._lock:
            transition = transition_fn(self._state, *args)
            self._state = transition.state
            if CUSTOM_SCHOOLS_KEY in transition.dirty:
                self._catalog = Catalog(self._base, self._state.custom_schools)
            persisted = self._persist(transition)
            return DispatchResult(transition, persisted)

    def add_school(self, draft, now_ms: Optional[int] = None) -> Tuple[School, DispatchResult]:
        """
        Create a custom school from a validated draft and append it.

        Id and ranking are chosen under the same lock as the append, so
        concurrent submissions never share either.
        """
        with self._lock:
            school = build_custom_school(draft, self._catalog, now_ms)
            return school, self.dispatch(add_custom_school, school)

    def _persist(self, transition: Transition) -> bool:
        if not transition.dirty:
            return True
        store = self._store_factory()
        persisted = True
        # Fixed order so writes are deterministic
        for key in SLICE_KEYS:
            if key in transition.dirty:
                value = encode_slice(key, transition.state.slice_value(key))
                if not store.save(key, value):
                    persisted = False
        if not persisted:
            logger.warning(f"Best-effort persistence failed for {sorted(transition.dirty)}")
        return persisted


def get_session() -> TrackerSession:
    """The session registered on the current app."""
    return current_app.extensions['tracker_session']


def request_today() -> date:
    """Today's date for countdowns. TODAY in app config pins it (tests)."""
    pinned = current_app.config.get('TODAY')
    if pinned:
        return to_date(pinned, field='TODAY')
    return date.today()
