import pytest

from parameters import DEFAULT_PARAMETERS, InvalidParameterError, SimulationParameters


class TestValidation:

    def test_defaults_are_valid(self):
        parameters = SimulationParameters()
        assert parameters.to_dict() == {key: pytest.approx(value) for key, value in DEFAULT_PARAMETERS.items()}
        assert parameters.mean_inter_arrival == 15.0

    @pytest.mark.parametrize("key, value", [
        ("runway_count", 0),
        ("slot_duration", 0),
        ("arrival_frequency", 61),
        ("arrival_frequency", 0),
        ("ground_duration_mean", 0.5),
        ("ground_duration_stddev", 0),
        ("ground_duration_min", -1),
        ("retry_delay_mean", 0),
        ("retry_delay_stddev", 0.9),
    ])
    def test_out_of_range_values(self, key, value):
        with pytest.raises(InvalidParameterError, match=f"{key}= "):
            SimulationParameters(**{key: value})

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            SimulationParameters(runway_count=-3)

    def test_slot_is_rounded_to_units(self):
        assert SimulationParameters(slot_duration=119.6).slot_units == 120

    def test_half_slot_rounds_up(self):
        assert SimulationParameters(slot_duration=2.5).slot_units == 3

    def test_quoted_numbers_are_converted(self):
        parameters = SimulationParameters.from_dict({"slot_duration": "120", "runway_count": "2"})
        assert parameters.slot_units == 120
        assert parameters.runway_count == 2


class TestLoading:

    def test_from_dict_fills_defaults(self):
        parameters = SimulationParameters.from_dict({"runway_count": 3})
        assert parameters.runway_count == 3
        assert parameters.retry_delay_mean == DEFAULT_PARAMETERS["retry_delay_mean"]

    def test_unknown_key_is_rejected(self):
        with pytest.raises(InvalidParameterError, match="runways"):
            SimulationParameters.from_dict({"runways": 3})

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "params.yaml"
        path.write_text("seed: 9\nrunway_count: 4\nslot_duration: 60\n", encoding="utf-8")
        parameters = SimulationParameters.from_yaml(str(path))
        assert (parameters.seed, parameters.runway_count, parameters.slot_duration) == (9, 4, 60)

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert SimulationParameters.from_yaml(str(path)).to_dict() == SimulationParameters().to_dict()

    def test_yaml_must_be_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(InvalidParameterError):
            SimulationParameters.from_yaml(str(path))

    def test_with_seed(self):
        parameters = SimulationParameters(seed=3)
        assert parameters.with_seed(11).seed == 11
        assert parameters.with_seed(None).seed == 3
        assert parameters.seed == 3
