"""Flattening of request maps into RPC query parameters."""

import json
from typing import Any


def to_query_value(value: Any) -> str:
    """Render a scalar the way the RPC gateway expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(value: Any, result: dict[str, str], prefix: str) -> None:
    if value is None:
        return

    if isinstance(value, dict):
        for key, item in value.items():
            _flatten(item, result, f"{prefix}.{key}" if prefix else key)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value, start=1):
            _flatten(item, result, f"{prefix}.{index}")
    else:
        result[prefix] = to_query_value(value)


def flatten_query(filter_map: dict[str, Any]) -> dict[str, str]:
    """Flatten a nested map into repeat-list query parameters.

    Args:
        filter_map: Map of wire names to values

    Returns:
        Flat map, e.g. ``{"Tag": [{"Key": "a"}]}`` becomes ``{"Tag.1.Key": "a"}``

    Examples:
        >>> flatten_query({"ResourceId": ["i-1", "i-2"], "All": True})
        {'ResourceId.1': 'i-1', 'ResourceId.2': 'i-2', 'All': 'true'}
    """
    result: dict[str, str] = {}
    for key, value in filter_map.items():
        _flatten(value, result, key)
    return result


def array_to_string(array: Any, style: str) -> str:
    """Serialize a list or map into a single query value.

    Args:
        array: Value to serialize
        style: One of ``json``, ``simple``, ``spaceDelimited``, ``pipeDelimited``

    Returns:
        Serialized value

    Raises:
        ValueError: If style is unknown
    """
    if style == "json":
        return json.dumps(array, separators=(",", ":"), ensure_ascii=False)

    separators = {"simple": ",", "spaceDelimited": " ", "pipeDelimited": "|"}
    if style not in separators:
        raise ValueError(f"Unsupported serialization style: {style}")

    items = []
    for item in array:
        if isinstance(item, str):
            items.append(item)
        else:
            items.append(json.dumps(item, separators=(",", ":")))
    return separators[style].join(items)
