import pytest

from gas_telemetry.errors import ValidationError
from gas_telemetry.models.reading import SensorType
from gas_telemetry.utils.validation import (
    map_node,
    node_from_filter,
    normalize_submission,
    parse_int,
)


class TestParseInt:
    @pytest.mark.parametrize("value,expected", [
        (150, 150),
        (0, 0),
        (-12, -12),
        (42.0, 42),
        ("150", 150),
        (" 20", 20),
        ("+7", 7),
        ("-3", -3),
        ("12ppm", 12),
        ("3.9", 3),
    ])
    def test_numeric_inputs(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", [
        "abc", "", "   ", "x12", None, True, False, 3.5, float("nan"), float("inf"), [1], {"v": 1},
        "\u0663", "\u0661\u0665\u0660", "\uff11\uff15\uff10", "1" * 5000,
    ])
    def test_non_numeric_inputs(self, value):
        assert parse_int(value) is None


class TestNodeMapping:
    @pytest.mark.parametrize("value,expected", [
        (1, SensorType.NODE1),
        (2, SensorType.NODE2),
        (3, SensorType.NODE3),
        ("1", SensorType.NODE1),
        ("3", SensorType.NODE3),
        (2.0, SensorType.NODE2),
    ])
    def test_known_nodes(self, value, expected):
        assert map_node(value) is expected

    @pytest.mark.parametrize("value", [0, 4, 5, -1, "x", "", None, 1.5])
    def test_unknown_nodes_have_no_mapping(self, value):
        assert map_node(value) is None

    def test_filter_matches_literal_strings_only(self):
        assert node_from_filter("2") is SensorType.NODE2
        assert node_from_filter("9") is None
        assert node_from_filter("02") is None
        assert node_from_filter("NODE2") is None
        assert node_from_filter("") is None
        assert node_from_filter(None) is None


class TestNormalizeSubmission:
    def test_valid_submission(self):
        reading = normalize_submission({"node": 1, "mq135": 150, "mq2": 20})
        assert reading.node is SensorType.NODE1
        assert reading.mq135 == 150
        assert reading.mq2 == 20
        assert reading.r1 == 0
        assert reading.r2 == 0

    def test_string_values_are_coerced(self):
        reading = normalize_submission({"node": "3", "mq135": "410", "mq2": "7"})
        assert reading.node is SensorType.NODE3
        assert (reading.mq135, reading.mq2) == (410, 7)

    @pytest.mark.parametrize("payload", [
        {"mq135": 1, "mq2": 1},
        {"node": 1, "mq2": 1},
        {"node": 1, "mq135": 1},
        {},
    ])
    def test_missing_field(self, payload):
        with pytest.raises(ValidationError) as exc:
            normalize_submission(payload)
        assert "missing" in exc.value.message.lower()

    def test_null_counts_as_present(self):
        with pytest.raises(ValidationError) as exc:
            normalize_submission({"node": 1, "mq135": None, "mq2": 1})
        assert "numeric value" in exc.value.message.lower()

    @pytest.mark.parametrize("payload", [
        {"node": 1, "mq135": "x", "mq2": 10},
        {"node": 1, "mq135": 10, "mq2": "abc"},
        {"node": 1, "mq135": 10.5, "mq2": 10},
        {"node": 1, "mq135": 2 ** 31, "mq2": 10},
    ])
    def test_invalid_numeric_value(self, payload):
        with pytest.raises(ValidationError) as exc:
            normalize_submission(payload)
        assert "numeric value" in exc.value.message.lower()

    @pytest.mark.parametrize("node", [0, 4, 5, "x", None])
    def test_invalid_node(self, node):
        with pytest.raises(ValidationError) as exc:
            normalize_submission({"node": node, "mq135": 10, "mq2": 10})
        assert "invalid node" in exc.value.message.lower()

    @pytest.mark.parametrize("payload", [
        {"node": 1, "mq135": "1" * 5000, "mq2": 1},
        {"node": 1, "mq135": 1, "mq2": "9" * 5000},
    ])
    def test_oversized_digit_run_is_invalid_numeric(self, payload):
        with pytest.raises(ValidationError) as exc:
            normalize_submission(payload)
        assert "numeric value" in exc.value.message.lower()

    @pytest.mark.parametrize("node", ["1" * 5000, "\u0663", "\uff13"])
    def test_node_outside_ascii_range_is_invalid(self, node):
        with pytest.raises(ValidationError) as exc:
            normalize_submission({"node": node, "mq135": 10, "mq2": 10})
        assert "invalid node" in exc.value.message.lower()

    def test_non_ascii_sensor_digits_rejected(self):
        with pytest.raises(ValidationError) as exc:
            normalize_submission({"node": 1, "mq135": "\u0661\u0665\u0660", "mq2": 1})
        assert "numeric value" in exc.value.message.lower()

    def test_numeric_check_runs_before_node_check(self):
        with pytest.raises(ValidationError) as exc:
            normalize_submission({"node": 9, "mq135": "x", "mq2": 1})
        assert "numeric value" in exc.value.message.lower()

    @pytest.mark.parametrize("payload", [None, [1, 2, 3], "node=1", 5])
    def test_non_object_body(self, payload):
        with pytest.raises(ValidationError):
            normalize_submission(payload)
