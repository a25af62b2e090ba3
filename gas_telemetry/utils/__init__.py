"""
Helpers shared by the ingestion and query handlers.
"""

from gas_telemetry.utils.validation import (
    NODE_FILTERS,
    NODE_TYPES,
    map_node,
    node_from_filter,
    normalize_submission,
    parse_int,
)

__all__ = [
    "NODE_FILTERS",
    "NODE_TYPES",
    "map_node",
    "node_from_filter",
    "normalize_submission",
    "parse_int",
]
