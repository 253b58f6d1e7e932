import pytest

from runway_simulation import EventFactory, Statistics


class StubDeltaSource:
    """Delta source replaying fixed values; the last value of each sequence repeats."""
    def __init__(self, inter_arrivals=(0,), ground_durations=(0,), retry_delays=(0,)):
        self.inter_arrivals = list(inter_arrivals)
        self.ground_durations = list(ground_durations)
        self.retry_delays = list(retry_delays)

    @staticmethod
    def _next(values):
        return values.pop(0) if len(values) > 1 else values[0]

    def inter_arrival_delta(self):
        return self._next(self.inter_arrivals)

    def ground_duration(self):
        return self._next(self.ground_durations)

    def retry_delay(self):
        return self._next(self.retry_delays)


@pytest.fixture
def stub_source():
    return StubDeltaSource


@pytest.fixture
def factory():
    return EventFactory(StubDeltaSource(inter_arrivals=(10,), ground_durations=(30,), retry_delays=(5,)))


@pytest.fixture
def statistics():
    return Statistics()
