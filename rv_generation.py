import math

import numpy as np


class RVGenerator:
    """A class for generating random variables based on specified distributions."""

    @staticmethod
    def poisson_product_sample(_lambda: float, rng: np.random.Generator) -> int:
        """Generate one Poisson sample by multiplying uniforms (Knuth's method).

        Args:
            _lambda (float): Mean of the Poisson distribution.
            rng (np.random.Generator): Source of uniform draws.

        Returns:
            int: Number of uniform draws taken before the running product
                dropped below e^-lambda, minus one.
        """
        if _lambda <= 0:
            raise ValueError("Rate must be a positive value.")

        threshold = math.exp(-_lambda)
        product = 1.0
        count = -1
        while product >= threshold:
            product *= rng.uniform(0, 1)
            count += 1
        return count

    @staticmethod
    def floored_normal_sample(mean: float, std_dev: float, minimum: float, rng: np.random.Generator) -> float:
        """Generate one sample from a normal distribution truncated from below at `minimum`.

        Args:
            mean (float): Mean of the normal distribution.
            std_dev (float): Standard deviation of the normal distribution.
            minimum (float): Values below this are replaced by it.
            rng (np.random.Generator): Source of normal draws.

        Returns:
            float: The floored sample.
        """
        if std_dev < 0:
            raise ValueError("Standard deviation must be non-negative.")

        return max(rng.normal(mean, std_dev), minimum)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


# ------------------------------------------------------
# TIME DELTA SOURCE
# ------------------------------------------------------
class DeltaGenerator:
    """Integer time deltas for arrivals, ground handling and runway retries.

    Each instance owns its numpy generator, so two generators built with the
    same non-zero seed produce the same sequence regardless of what else
    runs in the process. A seed of 0 draws fresh entropy from the OS.
    """
    NO_SEED = 0

    def __init__(self, seed: int, mean_inter_arrival: float,
                 ground_duration_mean: float, ground_duration_stddev: float, ground_duration_min: float,
                 retry_delay_mean: float, retry_delay_stddev: float):
        self.seed = seed
        self.mean_inter_arrival = mean_inter_arrival
        self.ground_duration_mean = ground_duration_mean
        self.ground_duration_stddev = ground_duration_stddev
        self.ground_duration_min = ground_duration_min
        self.retry_delay_mean = retry_delay_mean
        self.retry_delay_stddev = retry_delay_stddev
        self.rng = np.random.default_rng(None if seed == self.NO_SEED else seed)

    @classmethod
    def from_parameters(cls, parameters) -> "DeltaGenerator":
        return cls(seed=parameters.seed,
                   mean_inter_arrival=parameters.mean_inter_arrival,
                   ground_duration_mean=parameters.ground_duration_mean,
                   ground_duration_stddev=parameters.ground_duration_stddev,
                   ground_duration_min=parameters.ground_duration_min,
                   retry_delay_mean=parameters.retry_delay_mean,
                   retry_delay_stddev=parameters.retry_delay_stddev)

    def inter_arrival_delta(self) -> int:
        """Time until the next arrival, Poisson distributed around the mean inter-arrival time."""
        return RVGenerator.poisson_product_sample(self.mean_inter_arrival, self.rng)

    def ground_duration(self) -> int:
        """Turnaround time between a finished landing and the takeoff request."""
        duration = RVGenerator.floored_normal_sample(self.ground_duration_mean, self.ground_duration_stddev,
                                                     self.ground_duration_min, self.rng)
        return round_half_up(duration)

    def retry_delay(self) -> int:
        """Wait before asking again for a runway."""
        delay = round_half_up(self.rng.normal(self.retry_delay_mean, self.retry_delay_stddev))
        # Event times must never run backwards
        return max(delay, 0)
