"""
Tracker State - Application state and pure transition functions

Each user intent maps to exactly one function here. A function takes the
current TrackerState and returns a Transition: the new state, the slice
keys that must be rewritten, and whether the intent was accepted.

Nothing in this module touches storage. Persisting the dirty slices is the
session's effect step (services.session.TrackerSession.dispatch).

Rules:
- Following a school for the first time sets its progress to planning,
  unless it already has a progress entry.
- Un-following or un-monitoring never clears progress or notes.
- The compare set holds at most COMPARE_LIMIT ids; an extra add is a
  rejected no-op with a notice.
- Notes are committed whole and capped at NOTE_MAX_CHARS.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional, Tuple

from constants import (
    COMPARE_LIMIT,
    CUSTOM_SCHOOLS_KEY,
    FOLLOWED_KEY,
    MONITORED_KEY,
    NOTE_MAX_CHARS,
    NOTES_KEY,
    NOTICE_COMPARE_FULL,
    PROGRESS_KEY,
    ProgressStatus,
)
from models.school import School


@dataclass(frozen=True)
class TrackerState:
    followed_ids: Tuple[str, ...] = ()
    monitored_ids: Tuple[str, ...] = ()
    compared_ids: Tuple[str, ...] = ()
    progress: Dict[str, ProgressStatus] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)
    custom_schools: Tuple[School, ...] = ()

    def slice_value(self, key: str):
        """In-memory value of a persisted slice."""
        return {
            FOLLOWED_KEY: self.followed_ids,
            MONITORED_KEY: self.monitored_ids,
            PROGRESS_KEY: self.progress,
            NOTES_KEY: self.notes,
            CUSTOM_SCHOOLS_KEY: self.custom_schools,
        }[key]

    def is_following(self, school_id: str) -> bool:
        return school_id in self.followed_ids

    def is_monitored(self, school_id: str) -> bool:
        return school_id in self.monitored_ids

    def is_compared(self, school_id: str) -> bool:
        return school_id in self.compared_ids


@dataclass(frozen=True)
class Transition:
    state: TrackerState
    dirty: FrozenSet[str] = frozenset()
    accepted: bool = True
    notice: Optional[str] = None


def state_from_slices(slices: Dict[str, object]) -> TrackerState:
    """Build the startup state from decoded slices (see services.storage)."""
    return TrackerState(
        followed_ids=tuple(slices.get(FOLLOWED_KEY) or ()),
        monitored_ids=tuple(slices.get(MONITORED_KEY) or ()),
        progress=dict(slices.get(PROGRESS_KEY) or {}),
        notes=dict(slices.get(NOTES_KEY) or {}),
        custom_schools=tuple(slices.get(CUSTOM_SCHOOLS_KEY) or ()),
    )


def _toggled(ids: Tuple[str, ...], school_id: str) -> Tuple[str, ...]:
    if school_id in ids:
        return tuple(i for i in ids if i != school_id)
    return ids + (school_id,)


def toggle_follow(state: TrackerState, school_id: str) -> Transition:
    followed = _toggled(state.followed_ids, school_id)
    dirty = {FOLLOWED_KEY}
    progress = state.progress

    if school_id in followed and school_id not in progress:
        progress = {**progress, school_id: ProgressStatus.PLANNING}
        dirty.add(PROGRESS_KEY)

    return Transition(
        state=replace(state, followed_ids=followed, progress=progress),
        dirty=frozenset(dirty),
    )


def toggle_monitor(state: TrackerState, school_id: str) -> Transition:
    return Transition(
        state=replace(state, monitored_ids=_toggled(state.monitored_ids, school_id)),
        dirty=frozenset({MONITORED_KEY}),
    )


def toggle_compare(state: TrackerState, school_id: str) -> Transition:
    """Add to or remove from the compare set. Not persisted."""
    if school_id in state.compared_ids:
        return remove_compare(state, school_id)

    if len(state.compared_ids) >= COMPARE_LIMIT:
        return Transition(state=state, accepted=False, notice=NOTICE_COMPARE_FULL)

    return Transition(state=replace(state, compared_ids=state.compared_ids + (school_id,)))


def remove_compare(state: TrackerState, school_id: str) -> Transition:
    compared = tuple(i for i in state.compared_ids if i != school_id)
    return Transition(state=replace(state, compared_ids=compared))


def set_progress(state: TrackerState, school_id: str, status: ProgressStatus) -> Transition:
    progress = {**state.progress, school_id: ProgressStatus(status)}
    return Transition(
        state=replace(state, progress=progress),
        dirty=frozenset({PROGRESS_KEY}),
    )


def commit_note(state: TrackerState, school_id: str, text: str) -> Transition:
    """Replace the note for a school. An empty note removes the entry."""
    text = (text or '')[:NOTE_MAX_CHARS]
    notes = {k: v for k, v in state.notes.items() if k != school_id}
    if text:
        notes[school_id] = text
    return Transition(
        state=replace(state, notes=notes),
        dirty=frozenset({NOTES_KEY}),
    )


def add_custom_school(state: TrackerState, school: School) -> Transition:
    return Transition(
        state=replace(state, custom_schools=state.custom_schools + (school,)),
        dirty=frozenset({CUSTOM_SCHOOLS_KEY}),
    )
