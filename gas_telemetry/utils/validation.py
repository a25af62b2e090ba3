"""
Input normalization for node submissions.

Sensor nodes post whatever their firmware serializes: numbers, numeric
strings, sometimes strings with trailing units. These helpers turn that into
a ``ReadingCreate`` or raise ``ValidationError``.
"""

import math
import re
from typing import Any, Mapping, Optional

from gas_telemetry.errors import ValidationError
from gas_telemetry.models.reading import SensorType
from gas_telemetry.schema.reading import ReadingCreate

REQUIRED_FIELDS = ("node", "mq135", "mq2")

NODE_TYPES = {
    1: SensorType.NODE1,
    2: SensorType.NODE2,
    3: SensorType.NODE3,
}

# Query strings are matched literally, so "01" or " 1" select nothing.
NODE_FILTERS = {str(number): node for number, node in NODE_TYPES.items()}

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> Optional[int]:
    """
    Coerce a submitted value to an integer.

    Native integers pass through, floats only when integral. Strings are read
    up to the first non-digit, so "42", " 42" and "42ppm" all give 42 while
    "abc" gives None. Only ASCII digits count.

    Returns:
        The integer, or None when the value is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # past the interpreter's digit limit, far outside any sensor range
                return None
    return None


def map_node(value: Any) -> Optional[SensorType]:
    number = parse_int(value)
    if number is None:
        return None
    return NODE_TYPES.get(number)


def node_from_filter(value: Optional[str]) -> Optional[SensorType]:
    if not value:
        return None
    return NODE_FILTERS.get(value)


def _sensor_value(value: Any) -> Optional[int]:
    number = parse_int(value)
    if number is None or not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def normalize_submission(payload: Any) -> ReadingCreate:
    """
    Validate a raw submission and build the reading to store.

    Checks run in order: presence of every field, numeric sensor values,
    then the node designator.

    Raises:
        ValidationError: on the first check that fails
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object with node, mq135 and mq2")

    missing = [field for field in REQUIRED_FIELDS if field not in payload]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    mq135 = _sensor_value(payload["mq135"])
    mq2 = _sensor_value(payload["mq2"])
    if mq135 is None or mq2 is None:
        raise ValidationError("Invalid numeric value: mq135 and mq2 must be valid integers")

    node = map_node(payload["node"])
    if node is None:
        raise ValidationError("Invalid node value. Must be 1, 2, or 3")

    return ReadingCreate(node=node, mq135=mq135, mq2=mq2, r1=0, r2=0)
