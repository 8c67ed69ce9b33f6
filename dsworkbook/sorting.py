"""Simple comparison sorts that report the array after every pass."""

from __future__ import annotations

from collections.abc import Iterable


def insertion_sort_passes(values: Iterable[int]) -> list[list[int]]:
    """Sort by insertion; return a snapshot of the array after each pass."""
    items = list(values)
    passes: list[list[int]] = []
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
        passes.append(list(items))
    return passes


def bubble_sort_passes(values: Iterable[int]) -> list[list[int]]:
    """Sort by bubbling; return a snapshot after each pass that swapped.

    Sorting stops at the first pass that makes no swap, which is not recorded.
    """
    items = list(values)
    passes: list[list[int]] = []
    for i in range(1, len(items)):
        swapped = False
        for j in range(1, len(items) - i + 1):
            if items[j - 1] > items[j]:
                items[j - 1], items[j] = items[j], items[j - 1]
                swapped = True
        if not swapped:
            break
        passes.append(list(items))
    return passes