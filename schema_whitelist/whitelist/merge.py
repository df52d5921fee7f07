from __future__ import annotations

from typing import Any, Mapping


def merge_recursive(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge nested mappings, later layers winning on leaf conflicts.

    Keys are unioned at every level, so merging ``{"t": {"column": {"a": True}}}``
    with ``{"t": {"index": {"I": True}}}`` keeps both categories. Inputs are not
    mutated.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                merged[key] = merge_recursive(current, value)
            elif isinstance(value, Mapping):
                merged[key] = merge_recursive(value)
            else:
                merged[key] = value
    return merged
