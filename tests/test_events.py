import dataclasses

import pytest

from runway_simulation import (Event, EventFactory, InvalidEventError, OperationKind, OperationPhase,
                               RunwayEvent)


class TestEventValues:

    def test_events_are_immutable(self, factory):
        event = factory.arrival(None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.time = 99

    def test_negative_time_is_rejected(self):
        with pytest.raises(InvalidEventError):
            Event(0, -1)

    def test_string_form(self):
        event = RunwayEvent(3, 40, 2, OperationKind.TAKEOFF, OperationPhase.RETRY)
        assert str(event) == "RunwayEvent: ID=3, T=40\tRETRY_TAKEOFF(2)"

    def test_timed_event_has_no_operation(self, factory):
        event = factory.timed_event(7)
        assert event.time == 7
        assert not isinstance(event, RunwayEvent)


class TestFactories:

    def test_first_arrival_starts_from_zero(self, factory):
        arrival = factory.arrival(None)
        assert arrival.time == 10
        assert arrival.kind is OperationKind.LANDING
        assert arrival.phase is OperationPhase.ATTEMPT

    def test_arrivals_chain_and_get_new_aircraft(self, factory):
        first = factory.arrival(None)
        second = factory.arrival(first)
        assert second.time == 20
        assert second.aircraft_id != first.aircraft_id

    def test_retry_keeps_kind_and_aircraft(self, factory):
        request = factory.arrival(None)
        retry = factory.retry(request)
        assert retry.time == request.time + 5
        assert retry.kind is request.kind
        assert retry.aircraft_id == request.aircraft_id
        assert retry.phase is OperationPhase.RETRY

    def test_completion_adds_slot(self, factory):
        request = factory.arrival(None)
        done = factory.completion(request, 120)
        assert done.time == request.time + 120
        assert done.phase is OperationPhase.COMPLETION
        assert done.aircraft_id == request.aircraft_id

    def test_departure_follows_ground_handling(self, factory):
        landing = factory.completion(factory.arrival(None), 120)
        departure = factory.departure_attempt(landing)
        assert departure.time == landing.time + 30
        assert departure.kind is OperationKind.TAKEOFF
        assert departure.phase is OperationPhase.ATTEMPT
        assert departure.aircraft_id == landing.aircraft_id

    def test_departure_requires_finished_landing(self, factory):
        with pytest.raises(InvalidEventError):
            factory.departure_attempt(factory.arrival(None))

    def test_completion_of_completion_is_rejected(self, factory):
        done = factory.completion(factory.arrival(None), 120)
        with pytest.raises(InvalidEventError):
            factory.completion(done, 120)

    def test_event_ids_are_unique_and_increasing(self, factory):
        first = factory.arrival(None)
        ids = [first.event_id, factory.retry(first).event_id, factory.completion(first, 1).event_id,
               factory.arrival(first).event_id]
        assert ids == sorted(set(ids))

    def test_factories_do_not_share_counters(self, stub_source):
        a = EventFactory(stub_source()).arrival(None)
        b = EventFactory(stub_source()).arrival(None)
        assert (a.event_id, a.aircraft_id) == (b.event_id, b.aircraft_id)
