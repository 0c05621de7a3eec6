"""Binary search variants over sorted (non-decreasing) sequences.

Functions that look for a position return -1 when there is none, in the manner
of ``str.find``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "binary_search",
    "binary_search_signed",
    "find_first_invariant",
    "search_first",
    "search_last",
    "insertion_point",
    "insertion_point_first",
    "first_position",
    "last_position",
    "last_less_than",
    "first_greater_than",
    "count_occurrences",
    "search_rotated",
]


def _require_length(seq: Sequence[Any], minimum: int) -> None:
    if len(seq) < minimum:
        raise ValueError(f"sequence must hold at least {minimum} item(s), got {len(seq)}")


def _bounds(seq: Sequence[Any], key: Any) -> tuple[int, int, int]:
    """Plain binary search; return (found index or -1, low, high) at exit."""
    low, high = 0, len(seq) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if key > seq[mid]:
            low = mid + 1
        elif key < seq[mid]:
            high = mid - 1
        else:
            return mid, low, high
    return -1, low, high


def binary_search(seq: Sequence[Any], key: Any) -> int:
    """Return the index of some item equal to ``key``, or -1."""
    return _bounds(seq, key)[0]


def binary_search_signed(seq: Sequence[Any], key: Any) -> int:
    """Return an index of ``key``, or ``-(insertion point + 1)`` when absent."""
    found, low, _ = _bounds(seq, key)
    return found if found >= 0 else -(low + 1)


def find_first_invariant(seq: Sequence[Any], key: Any) -> int:
    """First index of ``key`` using the seq[low] < key <= seq[high] invariant, or -1."""
    low, high = -1, len(seq)
    while low + 1 != high:
        mid = low + (high - low) // 2
        if key > seq[mid]:
            low = mid
        else:
            high = mid
    if high >= len(seq) or seq[high] != key:
        return -1
    return high


def search_first(seq: Sequence[Any], key: Any) -> int:
    """First index of ``key``, or -1. The sequence must hold at least two items."""
    _require_length(seq, 2)
    low, high = 0, len(seq) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if key < seq[mid]:
            high = mid - 1
        elif key > seq[mid]:
            low = mid + 1
        else:
            if mid == 0 or seq[mid - 1] != key:
                return mid
            high = mid - 1
    return -1


def search_last(seq: Sequence[Any], key: Any) -> int:
    """Last index of ``key``, or -1. The sequence must hold at least two items."""
    _require_length(seq, 2)
    last = len(seq) - 1
    low, high = 0, last
    while low <= high:
        mid = low + (high - low) // 2
        if key < seq[mid]:
            high = mid - 1
        elif key > seq[mid]:
            low = mid + 1
        else:
            if mid == last or seq[mid + 1] != key:
                return mid
            low = mid + 1
    return -1


def insertion_point(seq: Sequence[Any], key: Any) -> int:
    """Some index where ``key`` can be inserted keeping order. Needs a non-empty sequence."""
    _require_length(seq, 1)
    found, low, _ = _bounds(seq, key)
    return found if found >= 0 else low


def insertion_point_first(seq: Sequence[Any], key: Any) -> int:
    """The first index where ``key`` can be inserted keeping order.

    The sequence must hold at least two items.
    """
    _require_length(seq, 2)
    low, high = 0, len(seq) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if key < seq[mid]:
            high = mid - 1
        elif key > seq[mid]:
            low = mid + 1
        else:
            if mid == 0 or seq[mid - 1] != key:
                return mid
            high = mid - 1
    return low


def first_position(seq: Sequence[Any], target: Any) -> int:
    """Smallest i with seq[i] == target, or -1."""
    if not seq:
        return -1
    low, high = 0, len(seq) - 1
    while low < high:
        mid = low + ((high - low) >> 1)
        if seq[mid] < target:
            low = mid + 1
        else:
            high = mid
    return low if seq[low] == target else -1


def last_position(seq: Sequence[Any], target: Any) -> int:
    """Largest i with seq[i] == target, or -1."""
    if not seq:
        return -1
    low, high = 0, len(seq) - 1
    while low < high:
        mid = low + ((high - low + 1) >> 1)
        if seq[mid] > target:
            high = mid - 1
        else:
            low = mid
    return high if seq[high] == target else -1


def last_less_than(seq: Sequence[Any], target: Any) -> int:
    """Largest i with seq[i] < target, or -1."""
    if not seq:
        return -1
    low, high = 0, len(seq) - 1
    while low < high:
        mid = low + ((high - low + 1) >> 1)
        if seq[mid] < target:
            low = mid
        else:
            high = mid - 1
    return low if seq[low] < target else -1


def first_greater_than(seq: Sequence[Any], target: Any) -> int:
    """Smallest i with seq[i] > target, or -1."""
    if not seq:
        return -1
    low, high = 0, len(seq) - 1
    while low < high:
        mid = low + ((high - low) >> 1)
        if seq[mid] > target:
            high = mid
        else:
            low = mid + 1
    return high if seq[high] > target else -1


def count_occurrences(seq: Sequence[Any], target: Any) -> int:
    """Number of items equal to ``target``."""
    first = first_position(seq, target)
    if first == -1:
        return 0
    return last_position(seq, target) - first + 1


def search_rotated(seq: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct items, or -1."""
    low, high = 0, len(seq) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if target == seq[mid]:
            return mid
        if seq[mid] >= seq[low]:
            if seq[low] <= target < seq[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if seq[mid] < target <= seq[high]:
                low = mid + 1
            else:
                high = mid - 1
    return -1