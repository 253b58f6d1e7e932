"""
Simulation parameters for the runway contention simulator.

Parameters can be built directly, from a plain dictionary (as the scenario
catalogue does) or from a YAML file. Every constructor path ends in
`validate()`, so an engine never sees an out-of-range value.
"""
from typing import Optional

import yaml

from rv_generation import round_half_up


class InvalidParameterError(ValueError):
    """Raised when a simulation parameter is outside its allowed range."""


# ------------------------------------------------------
# DEFAULTS
# ------------------------------------------------------
DEFAULT_PARAMETERS = {
    "seed": 1,                       # 0 selects a non-reproducible sequence
    "runway_count": 2,
    "slot_duration": 120,            # Time units a runway stays busy per operation
    "arrival_frequency": 4.0,        # Arrivals per hour (60 time units)
    "ground_duration_mean": 600.0,   # Turnaround between landing and takeoff
    "ground_duration_stddev": 200.0,
    "ground_duration_min": 100.0,
    "retry_delay_mean": 180.0,       # Wait before asking again for a runway
    "retry_delay_stddev": 60.0,
}


class SimulationParameters:
    """Validated configuration for one simulation run."""
    def __init__(self, seed: int = DEFAULT_PARAMETERS["seed"],
                 runway_count: int = DEFAULT_PARAMETERS["runway_count"],
                 slot_duration: float = DEFAULT_PARAMETERS["slot_duration"],
                 arrival_frequency: float = DEFAULT_PARAMETERS["arrival_frequency"],
                 ground_duration_mean: float = DEFAULT_PARAMETERS["ground_duration_mean"],
                 ground_duration_stddev: float = DEFAULT_PARAMETERS["ground_duration_stddev"],
                 ground_duration_min: float = DEFAULT_PARAMETERS["ground_duration_min"],
                 retry_delay_mean: float = DEFAULT_PARAMETERS["retry_delay_mean"],
                 retry_delay_stddev: float = DEFAULT_PARAMETERS["retry_delay_stddev"]):
        self.seed = int(seed)
        self.runway_count = int(runway_count)
        self.slot_duration = float(slot_duration)
        self.arrival_frequency = float(arrival_frequency)
        self.ground_duration_mean = float(ground_duration_mean)
        self.ground_duration_stddev = float(ground_duration_stddev)
        self.ground_duration_min = float(ground_duration_min)
        self.retry_delay_mean = float(retry_delay_mean)
        self.retry_delay_stddev = float(retry_delay_stddev)
        self.validate()

    @property
    def mean_inter_arrival(self) -> float:
        """Mean time units between two arrivals."""
        return 60.0 / self.arrival_frequency

    @property
    def slot_units(self) -> int:
        """Slot duration rounded to whole time units."""
        return round_half_up(self.slot_duration)

    def validate(self):
        """Check every range constraint, raising on the first violation."""
        if self.runway_count < 1:
            self._invalid("runway_count", self.runway_count)
        if self.slot_duration < 1:
            self._invalid("slot_duration", self.slot_duration)
        if self.arrival_frequency <= 0 or self.mean_inter_arrival < 1.0:
            self._invalid("arrival_frequency", self.arrival_frequency)
        if self.ground_duration_mean < 1.0:
            self._invalid("ground_duration_mean", self.ground_duration_mean)
        if self.ground_duration_stddev < 1.0:
            self._invalid("ground_duration_stddev", self.ground_duration_stddev)
        if self.ground_duration_min < 0:
            self._invalid("ground_duration_min", self.ground_duration_min)
        if self.retry_delay_mean < 1.0:
            self._invalid("retry_delay_mean", self.retry_delay_mean)
        if self.retry_delay_stddev < 1.0:
            self._invalid("retry_delay_stddev", self.retry_delay_stddev)

    @staticmethod
    def _invalid(key: str, value):
        raise InvalidParameterError(f"{key}= {value}")

    @classmethod
    def from_dict(cls, values: dict) -> "SimulationParameters":
        """Build parameters from a mapping; missing keys take their defaults."""
        unknown = set(values) - set(DEFAULT_PARAMETERS)
        if unknown:
            raise InvalidParameterError(f"Unknown parameters: {', '.join(sorted(unknown))}")
        merged = dict(DEFAULT_PARAMETERS)
        merged.update(values)
        return cls(**merged)

    @classmethod
    def from_yaml(cls, path: str) -> "SimulationParameters":
        """Load parameters from a YAML file holding a single mapping."""
        with open(path, "r", encoding="utf-8") as handle:
            values = yaml.safe_load(handle)
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise InvalidParameterError(f"{path}: expected a mapping of parameters")
        return cls.from_dict(values)

    def to_dict(self) -> dict:
        return {key: getattr(self, key) for key in DEFAULT_PARAMETERS}

    def with_seed(self, seed: Optional[int]) -> "SimulationParameters":
        """Copy of these parameters with another seed (unchanged if `seed` is None)."""
        values = self.to_dict()
        if seed is not None:
            values["seed"] = seed
        return SimulationParameters.from_dict(values)

    def __str__(self) -> str:
        return "\n" + "\n".join(f"\t{key}={value}" for key, value in self.to_dict().items())
