"""Counting inversions with merge sort."""

from collections.abc import Sequence


def _sort_count(values: list) -> tuple[list, int]:
    if len(values) <= 1:
        return values, 0
    mid = len(values) // 2
    left, left_count = _sort_count(values[:mid])
    right, right_count = _sort_count(values[mid:])
    merged = []
    count = left_count + right_count
    j = 0
    for item in left:
        while j < len(right) and right[j] < item:
            merged.append(right[j])
            j += 1
        count += j
        merged.append(item)
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Sequence) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_count(list(values))[1]