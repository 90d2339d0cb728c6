"""
Slice Storage - Persistence adapter for per-user overlay state

Every overlay (followed ids, monitored ids, progress map, notes map,
custom schools) is an independently keyed slice. Slices are loaded once
at startup and rewritten in full after each mutation.

Failure policy:
- Read: a missing, undecodable or wrongly shaped slice degrades to that
  slice's empty default. No partial recovery inside a slice.
- Write: logged and reported as False. Never raised to the caller.

Usage:
    from services.storage import SliceStore, decode_slices

    store = SliceStore(db.session)
    raw = {key: store.load(key) for key in SLICE_KEYS}
    slices = decode_slices(raw)
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from constants import (
    CUSTOM_SCHOOLS_KEY,
    FOLLOWED_KEY,
    MONITORED_KEY,
    NOTE_MAX_CHARS,
    NOTES_KEY,
    PROGRESS_KEY,
    ProgressStatus,
)
from models.school import School
from models.stored_slice import StoredSlice
from utils.normalize import ValidationError, to_enum

logger = logging.getLogger(__name__)


class SliceStore:
    """
    Whole-value key-value store over the stored_slices table.

    load() returns the decoded JSON value or None when the key is absent
    or unreadable; save() overwrites the key and commits immediately.
    """

    def __init__(self, session):
        self._session = session

    def load(self, key: str) -> Optional[Any]:
        try:
            row = self._session.get(StoredSlice, key)
        except SQLAlchemyError as e:
            logger.warning(f"Slice read failed for {key}: {e}")
            self._session.rollback()
            return None

        if row is None:
            return None

        try:
            return json.loads(row.value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Slice {key} is not valid JSON, using default: {e}")
            return None

    def save(self, key: str, value: Any) -> bool:
        payload = json.dumps(value, ensure_ascii=False)
        try:
            row = self._session.get(StoredSlice, key)
            if row is None:
                self._session.add(StoredSlice(key=key, value=payload))
            else:
                row.value = payload
            self._session.commit()
            return True
        except SQLAlchemyError:
            logger.exception(f"Slice write failed for {key}")
            self._session.rollback()
            return False


# =============================================================================
# SLICE CODECS
# =============================================================================
# Each decoder either returns a fully valid slice or raises; the caller
# substitutes the empty default on any failure.

def _decode_id_list(value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError("Expected a list of school ids", received_value=value)
    # Keep first occurrence order, drop duplicates
    return list(dict.fromkeys(value))


def _decode_progress(value: Any) -> Dict[str, ProgressStatus]:
    if not isinstance(value, dict):
        raise ValidationError("Expected a progress map", received_value=value)
    progress = {}
    for school_id, raw in value.items():
        status = to_enum(raw, ProgressStatus, field='progress')
        if status is None:
            raise ValidationError(f"Missing status for {school_id}", field='progress')
        progress[str(school_id)] = status
    return progress


def _decode_notes(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ValidationError("Expected a notes map", received_value=value)
    return {str(k): v[:NOTE_MAX_CHARS] for k, v in value.items() if v}


def _decode_custom_schools(value: Any) -> List[School]:
    if not isinstance(value, list):
        raise ValidationError("Expected a list of school records", received_value=value)
    return [School.from_dict(record) for record in value]


_DECODERS: Dict[str, Callable[[Any], Any]] = {
    FOLLOWED_KEY: _decode_id_list,
    MONITORED_KEY: _decode_id_list,
    PROGRESS_KEY: _decode_progress,
    NOTES_KEY: _decode_notes,
    CUSTOM_SCHOOLS_KEY: _decode_custom_schools,
}

_DEFAULTS: Dict[str, Callable[[], Any]] = {
    FOLLOWED_KEY: list,
    MONITORED_KEY: list,
    PROGRESS_KEY: dict,
    NOTES_KEY: dict,
    CUSTOM_SCHOOLS_KEY: list,
}


def decode_slice(key: str, value: Any) -> Any:
    """Decode one raw slice, degrading to the empty default."""
    if value is None:
        return _DEFAULTS[key]()
    try:
        return _DECODERS[key](value)
    except (ValidationError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Slice {key} is corrupt, using empty default: {e}")
        return _DEFAULTS[key]()


def decode_slices(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {key: decode_slice(key, raw.get(key)) for key in _DECODERS}


def encode_slice(key: str, value: Any) -> Any:
    """Convert an in-memory slice to its JSON-ready form."""
    if key in (FOLLOWED_KEY, MONITORED_KEY):
        return list(value)
    if key == PROGRESS_KEY:
        return {school_id: ProgressStatus(status).value for school_id, status in value.items()}
    if key == NOTES_KEY:
        return dict(value)
    if key == CUSTOM_SCHOOLS_KEY:
        return [school.to_dict() for school in value]
    raise KeyError(key)
