import pytest

from confidence_interval import ConfidenceInterval


class TestConfidenceInterval:

    def test_needs_two_samples(self):
        ci = ConfidenceInterval(min_samples_count=2, max_interval_width=0.1)
        assert ci.compute_interval() is None
        ci.add_data_point(1.0)
        assert ci.compute_interval() is None
        assert not ci.has_enough_data()

    def test_interval_is_centered_on_mean(self):
        ci = ConfidenceInterval(min_samples_count=3, max_interval_width=0.5)
        for value in (9.0, 10.0, 11.0):
            ci.add_data_point(value)
        is_final, (lower, upper) = ci.compute_interval()
        assert ci.average == pytest.approx(10.0)
        assert ci.std_dev == pytest.approx(1.0)
        assert (lower + upper) / 2 == pytest.approx(10.0)
        # z(0.975) ~ 1.96, sigma / sqrt(3)
        assert upper - lower == pytest.approx(2 * 1.959964 / 3 ** 0.5, rel=1e-4)
        assert is_final

    def test_wide_interval_is_not_final(self):
        ci = ConfidenceInterval(min_samples_count=2, max_interval_width=0.01)
        for value in (1.0, 50.0, 100.0):
            ci.add_data_point(value)
        is_final, _ = ci.compute_interval()
        assert not is_final

    def test_student_t_is_wider_than_normal(self):
        normal = ConfidenceInterval(min_samples_count=2, max_interval_width=1.0)
        student = ConfidenceInterval(min_samples_count=2, max_interval_width=1.0, use_student_t=True)
        for value in (4.0, 6.0, 5.0, 7.0):
            normal.add_data_point(value)
            student.add_data_point(value)
        _, (n_low, n_high) = normal.compute_interval()
        _, (t_low, t_high) = student.compute_interval()
        assert t_high - t_low > n_high - n_low

    @pytest.mark.parametrize("level", [0.0, 1.0, 1.5])
    def test_rejects_invalid_level(self, level):
        with pytest.raises(ValueError):
            ConfidenceInterval(min_samples_count=2, max_interval_width=0.1, confidence_level=level)
