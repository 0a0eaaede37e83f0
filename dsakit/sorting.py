"""Merge sort and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["merge_sort", "binary_search"]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None