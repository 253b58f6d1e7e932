"""
Confidence intervals over the KPIs of independent simulation replications.
"""
from typing import Optional

import numpy as np
from scipy import stats


# ----------------------------------------------------------------------------
# CONFIDENCE INTERVAL
# ----------------------------------------------------------------------------
class ConfidenceInterval:
    """Accumulates one KPI across replications and reports its confidence interval.

    The interval is considered final once its width is at most
    `max_interval_width` times the magnitude of the sample mean.
    """
    def __init__(self, min_samples_count: int, max_interval_width: float, confidence_level: float = 0.95,
                 use_student_t: bool = False):
        if not 0 < confidence_level < 1:
            raise ValueError("Confidence level must be between 0 and 1.")
        if min_samples_count < 2:
            raise ValueError("At least two samples are needed for an interval.")
        self.min_samples_count = min_samples_count
        self.max_interval_width = max_interval_width
        self.confidence_level = confidence_level
        self.use_student_t = use_student_t
        self.data: list[float] = []
        self.average: float = 0.0
        self.std_dev: float = 0.0

    @staticmethod
    def format_level(confidence_level: float) -> str:
        return f"{confidence_level * 100:.0f}%"

    def add_data_point(self, value: float):
        """Add one replication's value and refresh the sample mean and deviation."""
        self.data.append(float(value))
        samples = np.asarray(self.data)
        self.average = float(samples.mean())
        if len(self.data) > 1:
            self.std_dev = float(samples.std(ddof=1))

    def get_sample_size(self) -> int:
        return len(self.data)

    def has_enough_data(self) -> bool:
        return self.get_sample_size() >= self.min_samples_count

    def critical_value(self) -> float:
        tail = 1 - (1 - self.confidence_level) / 2
        if self.use_student_t:
            return float(stats.t.ppf(tail, df=self.get_sample_size() - 1))
        return float(stats.norm.ppf(tail))

    def compute_interval(self) -> Optional[tuple[bool, tuple[float, float]]]:
        """Return (is_final, (lower, upper)), or None with fewer than two samples."""
        sample_count = self.get_sample_size()
        if sample_count < 2:
            return None

        margin_of_error = self.critical_value() * (self.std_dev / np.sqrt(sample_count))
        lower_bound = self.average - margin_of_error
        upper_bound = self.average + margin_of_error

        final_interval = (upper_bound - lower_bound) <= self.max_interval_width * abs(self.average)
        return (bool(final_interval), (lower_bound, upper_bound))
