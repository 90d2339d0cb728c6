"""
Unit tests for services/request_tracker.py
"""

import pytest

from services.request_tracker import RequestSlot, RequestTracker


class TestRequestSlot:
    """Single-slot busy flag with generation counter"""

    def test_begin_claims_slot(self):
        slot = RequestSlot("ask")
        generation = slot.begin()
        assert generation == 1
        assert slot.in_flight is True

    def test_second_begin_while_busy_rejected(self):
        slot = RequestSlot("ask")
        slot.begin()
        assert slot.begin() is None

    def test_finish_stores_latest_result(self):
        slot = RequestSlot("ask")
        generation = slot.begin()
        assert slot.finish(generation, "answer") is True
        assert slot.in_flight is False
        assert slot.last_response == "answer"

    def test_stale_result_discarded(self):
        slot = RequestSlot("ask")
        first = slot.begin()
        slot.finish(first, "one")
        second = slot.begin()

        # A late result from the first generation must not overwrite anything
        assert slot.finish(first, "late") is False
        assert slot.last_response == "one"
        assert slot.in_flight is True

        assert slot.finish(second, "two") is True
        assert slot.last_response == "two"

    def test_snapshot(self):
        slot = RequestSlot("monitor")
        generation = slot.begin()
        snapshot = slot.snapshot()
        assert snapshot.in_flight is True
        assert snapshot.generation == generation
        assert snapshot.last_response is None


class TestRequestTracker:
    """Named slots"""

    def test_slots_independent(self):
        tracker = RequestTracker("ask", "lookup")
        tracker.slot("ask").begin()
        assert tracker.slot("lookup").begin() == 1

    def test_unknown_slot(self):
        with pytest.raises(KeyError):
            RequestTracker("ask").slot("monitor")
