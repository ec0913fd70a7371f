"""
merge.py

Responsibility: Combine structural data from several collaborators into one API record.

Rules (left to right, later sources win):
- mappings merge recursively
- lists concatenate; an item whose `name` matches an earlier item is merged into it in place
- anything else is replaced

Inputs are never mutated; the result shares no objects with them.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def _merge_lists(left: list[Any], right: list[Any]) -> list[Any]:
    out = copy.deepcopy(left)
    index = {
        item["name"]: i
        for i, item in enumerate(out)
        if isinstance(item, Mapping) and "name" in item
    }
    for item in right:
        if isinstance(item, Mapping) and item.get("name") in index:
            pos = index[item["name"]]
            out[pos] = _merge_values(out[pos], item)
            continue
        if isinstance(item, Mapping) and "name" in item:
            index[item["name"]] = len(out)
        out.append(copy.deepcopy(item))
    return out


def _merge_values(left: Any, right: Any) -> Any:
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        out = copy.deepcopy(dict(left))
        for key, value in right.items():
            out[key] = _merge_values(out[key], value) if key in out else copy.deepcopy(value)
        return out
    if isinstance(left, list) and isinstance(right, list):
        return _merge_lists(left, right)
    return copy.deepcopy(right)


def deepmerge(*sources: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for source in sources:
        result = _merge_values(result, source)
    return result
