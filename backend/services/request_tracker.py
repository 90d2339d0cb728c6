"""
Request Tracker - Single-slot guard for advisory calls

Each advisory call site (ask, monitor, lookup) owns one RequestSlot:
- begin() refuses a new call while one is in flight
- every accepted call gets a new generation number
- finish() stores the result as the slot's last response only when the
  generation is still the latest one, so a late reply can never overwrite
  a newer one

There is no cancellation. An accepted call always runs to completion and
always releases the slot.
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SlotSnapshot:
    in_flight: bool
    generation: int
    last_response: Any


class RequestSlot:

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()
        self._in_flight = False
        self._generation = 0
        self._last_response: Any = None

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def last_response(self) -> Any:
        return self._last_response

    def begin(self) -> Optional[int]:
        """Claim the slot. Returns the new generation, or None if busy."""
        with self._lock:
            if self._in_flight:
                return None
            self._in_flight = True
            self._generation += 1
            return self._generation

    def finish(self, generation: int, result: Any) -> bool:
        """Release the slot; keep the result only if it is the latest."""
        with self._lock:
            if generation == self._generation:
                self._in_flight = False
                self._last_response = result
                return True
            return False

    def snapshot(self) -> SlotSnapshot:
        with self._lock:
            return SlotSnapshot(self._in_flight, self._generation, self._last_response)


class RequestTracker:
    """Named RequestSlots, one per call site."""

    def __init__(self, *names: str):
        self._slots: Dict[str, RequestSlot] = {name: RequestSlot(name) for name in names}

    def slot(self, name: str) -> RequestSlot:
        return self._slots[name]
