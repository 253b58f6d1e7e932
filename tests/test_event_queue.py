"""Ordering contract shared by both future event set implementations."""
import pytest

from runway_simulation import EventFactory, FutureEventSet, OrderedEventList


@pytest.fixture(params=[OrderedEventList, FutureEventSet], ids=["ordered-list", "heap"])
def queue(request):
    return request.param()


@pytest.fixture
def events():
    return EventFactory()


class TestEmptiness:

    def test_new_queue_is_empty(self, queue):
        assert queue.is_empty()
        assert queue.size() == 0
        assert len(queue) == 0

    def test_not_empty_after_insert(self, queue, events):
        queue.insert(events.timed_event(5))
        assert not queue.is_empty()

    def test_extract_on_empty_returns_none(self, queue):
        assert queue.extract() is None

    def test_insert_none_is_ignored(self, queue):
        queue.insert(None)
        assert queue.is_empty()


class TestOrdering:

    def test_same_time_extracted_in_insertion_order(self, queue, events):
        b = events.timed_event(1)
        c = events.timed_event(1)
        d = events.timed_event(1)
        queue.insert(b)
        queue.insert(c)
        queue.insert(d)
        assert queue.extract() is b
        assert queue.extract() is c
        assert queue.extract() is d

    def test_earlier_event_extracted_first(self, queue, events):
        later = events.timed_event(2)
        earlier = events.timed_event(1)
        queue.insert(later)
        queue.insert(earlier)
        assert queue.extract() is earlier

    def test_count_then_drain(self, queue, events):
        queue.insert(events.timed_event(1))
        queue.insert(events.timed_event(2))
        assert queue.size() == 2
        queue.extract()
        queue.extract()
        assert queue.is_empty()

    def test_mixed_sequence_is_stably_sorted(self, queue, events):
        times = [7, 3, 3, 9, 0, 7, 3, 12, 0, 5]
        inserted = [events.timed_event(t) for t in times]
        for event in inserted:
            queue.insert(event)

        extracted = []
        while not queue.is_empty():
            extracted.append(queue.extract())

        expected = sorted(inserted, key=lambda e: e.time)  # sorted() is stable
        assert [e.event_id for e in extracted] == [e.event_id for e in expected]

    def test_insert_between_extractions(self, queue, events):
        first = events.timed_event(4)
        queue.insert(first)
        queue.insert(events.timed_event(8))
        assert queue.extract() is first
        tie = events.timed_event(8)
        early = events.timed_event(6)
        queue.insert(tie)
        queue.insert(early)
        assert queue.extract() is early
        assert queue.extract().time == 8
        assert queue.extract() is tie


def test_both_implementations_agree(events):
    times = [5, 1, 5, 2, 2, 8, 1, 0, 5]
    ordered, heap = OrderedEventList(), FutureEventSet()
    for t in times:
        event = events.timed_event(t)
        ordered.insert(event)
        heap.insert(event)
    while not ordered.is_empty():
        assert ordered.extract() is heap.extract()
    assert heap.is_empty()
