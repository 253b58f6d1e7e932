# Module imports
import argparse
import itertools
import logging
import math
from dataclasses import dataclass
from enum import Enum
from queue import PriorityQueue
from typing import Optional

import numpy as np

from confidence_interval import ConfidenceInterval
from parameters import SimulationParameters
from rv_generation import DeltaGenerator

logger = logging.getLogger(__name__)


# --------------------------------------------------
# ERRORS
# --------------------------------------------------
class SimulationError(Exception):
    """Base class for every error raised by the simulation core."""


class InvalidEventError(SimulationError, ValueError):
    """An event was handed to an operation that cannot accept it."""


class RunwayInvariantError(SimulationError):
    """The runway or statistics state would become inconsistent; the run must abort."""


class OverCapacityError(RunwayInvariantError):
    pass


class OverReleaseError(RunwayInvariantError):
    pass


class EventOrderError(RunwayInvariantError):
    pass


class InconsistentCloseTimeError(SimulationError, ValueError):
    """Statistics were closed at an instant earlier than the last registered event."""


# --------------------------------------------------
# EVENT DEFINITION
# --------------------------------------------------
class OperationKind(Enum):
    LANDING = "LANDING"
    TAKEOFF = "TAKEOFF"


class OperationPhase(Enum):
    ATTEMPT = "ATTEMPT"
    RETRY = "RETRY"
    COMPLETION = "COMPLETION"


@dataclass(frozen=True)
class Event:
    """Anything that happens at an instant of the simulated timeline."""
    event_id: int
    time: int

    def __post_init__(self):
        if self.time < 0:
            raise InvalidEventError(f"Event {self.event_id} has negative time {self.time}")

    def occurs_before(self, other: "Event") -> bool:
        return self.time < other.time


@dataclass(frozen=True)
class RunwayEvent(Event):
    """A landing or takeoff request, or the end of one, for a given aircraft."""
    aircraft_id: int
    kind: OperationKind
    phase: OperationPhase

    @property
    def is_landing(self) -> bool:
        return self.kind is OperationKind.LANDING

    @property
    def is_takeoff(self) -> bool:
        return self.kind is OperationKind.TAKEOFF

    @property
    def is_request(self) -> bool:
        """Attempts and retries both ask for a runway."""
        return self.phase in (OperationPhase.ATTEMPT, OperationPhase.RETRY)

    @property
    def is_completion(self) -> bool:
        return self.phase is OperationPhase.COMPLETION

    def __str__(self) -> str:
        return (f"RunwayEvent: ID={self.event_id}, T={self.time}\t"
                f"{self.phase.value}_{self.kind.value}({self.aircraft_id})")


class EventFactory:
    """Builds events for one simulation run.

    The factory owns the event and aircraft counters, so identifiers restart
    for every run and two runs never share state.
    """
    def __init__(self, delta_source=None):
        self.delta_source = delta_source
        self.next_event_id = 0
        self.next_aircraft_id = 1

    def _take_event_id(self) -> int:
        event_id = self.next_event_id
        self.next_event_id += 1
        return event_id

    def _take_aircraft_id(self) -> int:
        aircraft_id = self.next_aircraft_id
        self.next_aircraft_id += 1
        return aircraft_id

    def _build(self, aircraft_id: int, kind: OperationKind, phase: OperationPhase, time: int) -> RunwayEvent:
        event = RunwayEvent(self._take_event_id(), time, aircraft_id, kind, phase)
        logger.debug("Generated %s", event)
        return event

    def timed_event(self, time: int) -> Event:
        """Bare event carrying only a time, for exercising queue ordering."""
        return Event(self._take_event_id(), time)

    def arrival(self, previous_arrival: Optional[RunwayEvent]) -> RunwayEvent:
        """Landing attempt of a new aircraft, chained after the previous arrival."""
        time = self.delta_source.inter_arrival_delta()
        if previous_arrival is not None:
            time += previous_arrival.time
        return self._build(self._take_aircraft_id(), OperationKind.LANDING, OperationPhase.ATTEMPT, time)

    def retry(self, request: RunwayEvent) -> RunwayEvent:
        if not request.is_request:
            raise InvalidEventError(f"Cannot retry {request}")
        time = request.time + self.delta_source.retry_delay()
        return self._build(request.aircraft_id, request.kind, OperationPhase.RETRY, time)

    def completion(self, request: RunwayEvent, slot_duration: int) -> RunwayEvent:
        if not request.is_request:
            raise InvalidEventError(f"Cannot complete {request}")
        return self._build(request.aircraft_id, request.kind, OperationPhase.COMPLETION,
                           request.time + slot_duration)

    def departure_attempt(self, landing_completion: RunwayEvent) -> RunwayEvent:
        if not (landing_completion.is_landing and landing_completion.is_completion):
            raise InvalidEventError(f"Departure requires a finished landing, got {landing_completion}")
        time = landing_completion.time + self.delta_source.ground_duration()
        return self._build(landing_completion.aircraft_id, OperationKind.TAKEOFF, OperationPhase.ATTEMPT, time)


# ------------------------------------------------------
# FUTURE EVENT SET
# ------------------------------------------------------
class OrderedEventList:
    """Events kept in extraction order; equal times leave in insertion order."""
    def __init__(self):
        self.events: list[Event] = []

    def insert(self, event: Optional[Event]):
        """Insert after every event that does not happen later than `event`. None is ignored."""
        if event is None:
            return
        if self.is_empty():
            self.events.insert(0, event)
            return
        # Scan from the newest end: most follow-ups land near the back
        for index in range(len(self.events) - 1, -1, -1):
            if not event.occurs_before(self.events[index]):
                self.events.insert(index + 1, event)
                return
        self.events.insert(0, event)

    def extract(self) -> Optional[Event]:
        if self.is_empty():
            return None
        return self.events.pop(0)

    def size(self) -> int:
        return len(self.events)

    def is_empty(self) -> bool:
        return not self.events

    def __len__(self) -> int:
        return self.size()


class FutureEventSet:
    """Priority queue of events ordered by time, ties broken by insertion sequence."""
    def __init__(self):
        self.events: PriorityQueue[tuple[int, int, Event]] = PriorityQueue()
        self.sequence = itertools.count()

    def insert(self, event: Optional[Event]):
        """Schedule event in priority queue. None is ignored."""
        if event is None:
            return
        self.events.put((event.time, next(self.sequence), event))

    def extract(self) -> Optional[Event]:
        """Earliest event, or None once the set is exhausted."""
        if self.is_empty():
            return None
        _, _, event = self.events.get_nowait()
        return event

    def size(self) -> int:
        return self.events.qsize()

    def is_empty(self) -> bool:
        return self.events.empty()

    def __len__(self) -> int:
        return self.size()


# --------------------------------------------------
# STATISTICS COLLECTION
# --------------------------------------------------
def _round_two_decimals(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


class Statistics:
    """Counters and time-weighted occupancy of the airport grounds and the runways.

    Every registered event first charges the current counts for the interval
    elapsed since the previous update, and only then applies its own change
    to the counts.
    """
    def __init__(self):
        self.on_time_landings: int = 0
        self.on_time_takeoffs: int = 0
        self.delayed_landings: int = 0
        self.delayed_takeoffs: int = 0
        self.completed_landings: int = 0
        self.completed_takeoffs: int = 0

        # Aircraft parked on the airport grounds, between landing and takeoff
        self.on_airport: int = 0
        self.max_on_airport: int = 0
        self.area_on_airport: int = 0

        # Aircraft currently holding a runway
        self.on_runways: int = 0
        self.max_on_runways: int = 0
        self.area_on_runways: int = 0

        # Time-weighted metrics
        self.last_update_time: int = 0
        self.last_event_time: int = 0

    def update_time_weighted_metrics(self, current_time: int):
        if current_time < self.last_update_time:
            raise EventOrderError(f"Time went backwards: {current_time} < {self.last_update_time}")
        time_delta = current_time - self.last_update_time
        self.area_on_runways += self.on_runways * time_delta
        self.area_on_airport += self.on_airport * time_delta
        self.last_update_time = current_time

    def register(self, event: RunwayEvent):
        """Account for one event that has just taken or freed a runway."""
        self.update_time_weighted_metrics(event.time)
        self.last_event_time = event.time

        if event.phase is OperationPhase.COMPLETION:
            self.on_runways -= 1
            if event.is_landing:
                self.completed_landings += 1
                self.on_airport += 1
            else:
                self.completed_takeoffs += 1
        else:
            self.on_runways += 1
            if event.is_takeoff:
                self.on_airport -= 1
            if event.phase is OperationPhase.ATTEMPT:
                if event.is_landing:
                    self.on_time_landings += 1
                else:
                    self.on_time_takeoffs += 1
            else:
                if event.is_landing:
                    self.delayed_landings += 1
                else:
                    self.delayed_takeoffs += 1

        self.max_on_airport = max(self.max_on_airport, self.on_airport)
        self.max_on_runways = max(self.max_on_runways, self.on_runways)

    def close(self, at_time: int):
        """Charge the current counts up to `at_time` so the means cover the whole run."""
        if at_time < self.last_event_time:
            raise InconsistentCloseTimeError(
                f"Inconsistent close time {at_time} (close) < {self.last_event_time} (last event)")
        self.update_time_weighted_metrics(at_time)
        self.last_event_time = at_time

    def get_mean_on_airport(self) -> Optional[float]:
        """Average aircraft on the grounds, or None when no time has elapsed."""
        if self.last_update_time == 0:
            return None
        return _round_two_decimals(self.area_on_airport / self.last_update_time)

    def get_mean_on_runways(self) -> Optional[float]:
        """Average aircraft on the runways, or None when no time has elapsed."""
        if self.last_update_time == 0:
            return None
        return _round_two_decimals(self.area_on_runways / self.last_update_time)

    def get_operations_on_time(self) -> int:
        return self.on_time_landings + self.on_time_takeoffs

    def get_operations_delayed(self) -> int:
        return self.delayed_landings + self.delayed_takeoffs

    def get_punctuality(self, kind: Optional[OperationKind] = None) -> float:
        """Percentage of operations started without a retry, truncated to one decimal."""
        if kind is OperationKind.LANDING:
            on_time, delayed = self.on_time_landings, self.delayed_landings
        elif kind is OperationKind.TAKEOFF:
            on_time, delayed = self.on_time_takeoffs, self.delayed_takeoffs
        else:
            on_time, delayed = self.get_operations_on_time(), self.get_operations_delayed()
        total = on_time + delayed
        if total == 0:
            return 100.0
        return (1000 * on_time // total) / 10.0

    def to_dict(self) -> dict:
        return {
            'time': self.last_event_time,
            'on_time_landings': self.on_time_landings,
            'delayed_landings': self.delayed_landings,
            'on_time_takeoffs': self.on_time_takeoffs,
            'delayed_takeoffs': self.delayed_takeoffs,
            'completed_landings': self.completed_landings,
            'completed_takeoffs': self.completed_takeoffs,
            'on_airport': self.on_airport,
            'max_on_airport': self.max_on_airport,
            'mean_on_airport': self.get_mean_on_airport(),
            'on_runways': self.on_runways,
            'max_on_runways': self.max_on_runways,
            'mean_on_runways': self.get_mean_on_runways(),
            'punctuality': self.get_punctuality(),
        }

    def __str__(self) -> str:
        def mean_text(value: Optional[float]) -> str:
            return "no data" if value is None else f"{value:.2f}"

        lines = [
            f"Statistics at T={self.last_event_time}",
            f"\tLANDINGS \tOn time: {self.on_time_landings}\tDelayed: {self.delayed_landings}"
            f"\tPunctuality: {self.get_punctuality(OperationKind.LANDING)}",
            f"\tTAKEOFFS \tOn time: {self.on_time_takeoffs}\tDelayed: {self.delayed_takeoffs}"
            f"\tPunctuality: {self.get_punctuality(OperationKind.TAKEOFF)}",
            f"\tTOTAL    \tOn time: {self.get_operations_on_time()}\tDelayed: {self.get_operations_delayed()}"
            f"\tPunctuality: {self.get_punctuality()}",
            f"\tAIRPORT  \tCurrent: {self.on_airport}\tMaximum: {self.max_on_airport}"
            f"\tMean: {mean_text(self.get_mean_on_airport())}",
            f"\tRUNWAYS  \tCurrent: {self.on_runways}\tMaximum: {self.max_on_runways}"
            f"\tMean: {mean_text(self.get_mean_on_runways())}",
        ]
        return "\n".join(lines)


# ------------------------------------------------------
# RUNWAY CONTROLLER
# ------------------------------------------------------
class RunwayController:
    """Hands out runways to landing and takeoff requests and takes them back."""
    def __init__(self, runway_count: int, slot_duration: int, statistics: Optional[Statistics] = None):
        self.runway_count = runway_count
        self.free_runways = runway_count
        self.slot_duration = slot_duration
        self.statistics = statistics if statistics is not None else Statistics()

    def has_free_runway(self) -> bool:
        return self.free_runways > 0

    def allocate(self, event: RunwayEvent):
        if not event.is_request:
            raise InvalidEventError(f"allocate requires an attempt or retry, got {event}")
        if self.free_runways <= 0:
            raise OverCapacityError(f"All {self.runway_count} runways are busy, cannot serve {event}")
        self.free_runways -= 1
        self.statistics.register(event)

    def release(self, event: RunwayEvent):
        if not event.is_completion:
            raise InvalidEventError(f"release requires a completion, got {event}")
        if self.free_runways >= self.runway_count:
            raise OverReleaseError(f"All {self.runway_count} runways are already free, cannot release for {event}")
        self.free_runways += 1
        self.statistics.register(event)

    def get_statistics(self, at_time: int) -> Statistics:
        self.statistics.close(at_time)
        return self.statistics

    def __str__(self) -> str:
        stats = self.statistics
        takeoffs_started = stats.on_time_takeoffs + stats.delayed_takeoffs
        on_ground = stats.completed_landings - takeoffs_started
        on_runways = self.runway_count - self.free_runways
        on_time = stats.get_operations_on_time()
        total = on_time + stats.get_operations_delayed()
        punctuality = 100 * on_time // total if total > 0 else 100
        return (f"T={stats.last_event_time} Occupancy= {on_ground}(airport) + {on_runways}(runways)."
                f" Punctuality={punctuality}%")


# ------------------------------------------------------
# EVENT HANDLERS
# ------------------------------------------------------
class EventHandlers:
    """State machine deciding what each dequeued event leads to."""

    @staticmethod
    def handle_runway_request(event: RunwayEvent, controller: RunwayController,
                              event_factory: EventFactory) -> RunwayEvent:
        """Attempt or retry of a landing or takeoff: take a runway, or come back later."""
        if controller.has_free_runway():
            controller.allocate(event)
            return event_factory.completion(event, controller.slot_duration)
        return event_factory.retry(event)

    @staticmethod
    def handle_landing_completion(event: RunwayEvent, controller: RunwayController,
                                  event_factory: EventFactory) -> RunwayEvent:
        """Aircraft leaves the runway and goes to ground handling before its departure."""
        controller.release(event)
        return event_factory.departure_attempt(event)

    @staticmethod
    def handle_takeoff_completion(event: RunwayEvent, controller: RunwayController) -> None:
        """Aircraft has left; nothing follows."""
        controller.release(event)
        return None


# --------------------------------------------------
# SIMULATION ENGINE
# --------------------------------------------------
class SimulationEngine:
    """Class to run the runway contention simulation."""
    def __init__(self, parameters: SimulationParameters, delta_source=None, future_event_set=None):
        self.parameters = parameters
        self.delta_source = delta_source if delta_source is not None else DeltaGenerator.from_parameters(parameters)
        self.event_factory = EventFactory(self.delta_source)
        self.statistics = Statistics()
        self.controller = RunwayController(parameters.runway_count, parameters.slot_units, self.statistics)
        self.future_event_set = future_event_set if future_event_set is not None else FutureEventSet()
        self.horizon: Optional[int] = None
        self.current_time: int = 0
        self.events_processed: int = 0

    def handle_event(self, event: RunwayEvent) -> Optional[RunwayEvent]:
        """Apply the state machine to one event and return its follow-up, if any."""
        if event.is_request:
            return EventHandlers.handle_runway_request(event, self.controller, self.event_factory)
        if event.is_landing:
            return EventHandlers.handle_landing_completion(event, self.controller, self.event_factory)
        return EventHandlers.handle_takeoff_completion(event, self.controller)

    def event_loop(self, horizon: int):
        """Main event loop: process every event up to and including `horizon`."""
        if self.horizon is not None:
            raise SimulationError("This engine has already run; build a new one for another run")
        self.horizon = horizon
        logger.info("Simulation started (horizon=%d, runways=%d, slot=%d)",
                    horizon, self.controller.runway_count, self.controller.slot_duration)

        self.future_event_set.insert(self.event_factory.arrival(None))
        event = self.future_event_set.extract()
        while event is not None and event.time <= horizon:
            self.current_time = event.time
            follow_up = self.handle_event(event)
            self.future_event_set.insert(follow_up)
            # Each arrival brings the next one into the timeline
            if event.is_landing and event.phase is OperationPhase.ATTEMPT:
                self.future_event_set.insert(self.event_factory.arrival(event))
            self.events_processed += 1
            logger.debug("%s", self.controller)
            event = self.future_event_set.extract()

        logger.info("Simulation finished after %d events (last at T=%d)",
                    self.events_processed, self.current_time)

    def compute_statistics(self, at_time: Optional[int] = None) -> Statistics:
        """Close the statistics at `at_time` (default: the horizon) and return them."""
        if at_time is None:
            at_time = self.horizon if self.horizon is not None else self.current_time
        return self.controller.get_statistics(at_time)

    def get_kpis(self) -> dict:
        stats = self.statistics
        return {
            'mean_on_runways': stats.get_mean_on_runways(),
            'mean_on_airport': stats.get_mean_on_airport(),
            'punctuality': stats.get_punctuality(),
            'delayed_operations': stats.get_operations_delayed(),
        }

    def print_statistics(self, verbose: bool = True) -> Optional[dict]:
        """Print simulation statistics; with verbose=False return only the KPIs."""
        if not verbose:
            return self.get_kpis()

        stats = self.statistics
        print(f"\n{'='*60}")
        print(f"SIMULATION STATISTICS (T={stats.last_event_time})")
        print(f"{'='*60}")

        print(f"\n--- Operations ---")
        print(f"Landings  - On time: {stats.on_time_landings:6} | Delayed: {stats.delayed_landings:6} | "
              f"Completed: {stats.completed_landings:6} | Punctuality: {stats.get_punctuality(OperationKind.LANDING):5.1f}%")
        print(f"Takeoffs  - On time: {stats.on_time_takeoffs:6} | Delayed: {stats.delayed_takeoffs:6} | "
              f"Completed: {stats.completed_takeoffs:6} | Punctuality: {stats.get_punctuality(OperationKind.TAKEOFF):5.1f}%")
        print(f"Total     - On time: {stats.get_operations_on_time():6} | Delayed: {stats.get_operations_delayed():6} | "
              f"Punctuality: {stats.get_punctuality():5.1f}%")

        print(f"\n--- Occupancy (Time-Weighted Averages) ---")
        for label, current, maximum, mean in (
                ("Airport", stats.on_airport, stats.max_on_airport, stats.get_mean_on_airport()),
                ("Runways", stats.on_runways, stats.max_on_runways, stats.get_mean_on_runways())):
            mean_text = "no data" if mean is None else f"{mean:.2f}"
            print(f"{label:9} - Current: {current:4} | Maximum: {maximum:4} | Mean: {mean_text}")

        print(f"\n--- Engine ---")
        print(f"Events processed: {self.events_processed}")
        print(f"Free runways: {self.controller.free_runways}/{self.controller.runway_count}")
        print(f"\n{'='*60}")
        return None


def run_simulation(parameters: SimulationParameters, horizon: int, delta_source=None) -> Statistics:
    """Run one simulation up to `horizon` and return its statistics closed at `horizon`."""
    engine = SimulationEngine(parameters, delta_source=delta_source)
    engine.event_loop(horizon)
    return engine.compute_statistics(horizon)


# --------------------------------------------------
# MULTIPLE RUNS WITH CONFIDENCE INTERVALS
# --------------------------------------------------
def run_multiple_simulations(parameters: SimulationParameters, horizon: int, num_runs: int = 20,
                             base_seed: int = 1, verbose: bool = False, use_student_t: bool = False):
    """Run independent replications and compute confidence intervals for the KPIs.

    use_student_t switches the intervals from normal to Student-t quantiles.
    """
    ci_calculators = {
        'mean_on_runways': ConfidenceInterval(min_samples_count=5, max_interval_width=0.10, confidence_level=0.95,
                                          use_student_t=use_student_t),
        'mean_on_airport': ConfidenceInterval(min_samples_count=5, max_interval_width=0.10, confidence_level=0.95,
                                          use_student_t=use_student_t),
        'punctuality': ConfidenceInterval(min_samples_count=5, max_interval_width=0.05, confidence_level=0.95,
                                          use_student_t=use_student_t),
        'delayed_operations': ConfidenceInterval(min_samples_count=5, max_interval_width=0.10, confidence_level=0.95,
                                          use_student_t=use_student_t),
    }

    all_kpis = []
    for i in range(num_runs):
        seed = base_seed + i
        print(f"Run {i+1}/{num_runs} (seed={seed})...", end=" ")

        engine = SimulationEngine(parameters.with_seed(seed))
        engine.event_loop(horizon)
        engine.compute_statistics(horizon)
        kpis = engine.print_statistics(verbose=False)
        all_kpis.append(kpis)

        for metric_name, value in kpis.items():
            if value is not None:
                ci_calculators[metric_name].add_data_point(value)

        print(f"Punctuality: {kpis['punctuality']:.1f}%")

        if verbose:
            engine.print_statistics(verbose=True)

    print(f"\n{'='*80}")
    print(f"CONFIDENCE INTERVAL RESULTS ({ConfidenceInterval.format_level(0.95)} confidence, {num_runs} runs)")
    print(f"{'='*80}\n")

    ci_results = {}
    for metric_name, calculator in ci_calculators.items():
        result = calculator.compute_interval() if calculator.has_enough_data() else None
        if result is None:
            print(f"{metric_name:25} {' INSUFFICIENT DATA':20}")
            continue
        is_final, (lower, upper) = result
        ci_results[metric_name] = (calculator.average, lower, upper, is_final)
        status = " CONVERGED" if is_final else " MORE DATA NEEDED"
        print(f"{metric_name:25} {status:20} Mean: {calculator.average:8.3f}  CI: [{lower:8.3f}, {upper:8.3f}]  "
              f"Width: {upper-lower:7.3f}")

    print(f"\n{'='*80}\n")
    return ci_results, all_kpis


def print_summary(all_kpis: list[dict]):
    """Summary statistics of every KPI across replications."""
    print("\nSummary Statistics Across All Runs:")
    print(f"{'='*80}")
    for metric in all_kpis[0].keys():
        values = [kpi[metric] for kpi in all_kpis if kpi[metric] is not None]
        if not values:
            print(f"{metric:25} no data")
            continue
        print(f"{metric:25} Mean: {np.mean(values):8.3f}  Std: {np.std(values):7.3f}  "
              f"Min: {np.min(values):8.3f}  Max: {np.max(values):8.3f}")


# --------------------------------------------------
# MAIN EXECUTION
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Simulate runway contention at an airport')
    parser.add_argument('horizon', type=int,
                        help='Last simulated instant (time units)')
    parser.add_argument('--params', type=str, default=None,
                        help='YAML file with simulation parameters (defaults are used otherwise)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Override the seed from the parameters (0 = non-reproducible)')
    parser.add_argument('--runs', type=int, default=1,
                        help='Number of independent replications; more than 1 computes confidence intervals')
    parser.add_argument('--student-t', action='store_true',
                        help='Use Student-t instead of normal quantiles for the confidence intervals')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    return parser


def main(argv: Optional[list[str]] = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.params:
        parameters = SimulationParameters.from_yaml(args.params)
    else:
        parameters = SimulationParameters()
    parameters = parameters.with_seed(args.seed)

    print(f"Simulation horizon: {args.horizon}")
    print(f"Simulation parameters: {parameters}")

    if args.runs > 1:
        _, all_kpis = run_multiple_simulations(parameters, args.horizon, num_runs=args.runs,
                                               base_seed=parameters.seed, use_student_t=args.student_t)
        print_summary(all_kpis)
        return

    engine = SimulationEngine(parameters)
    engine.event_loop(args.horizon)
    engine.compute_statistics(args.horizon)
    engine.print_statistics(verbose=True)


if __name__ == "__main__":
    main()
