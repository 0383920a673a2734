"""An unordered bag of items that can be sorted by quicksort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def _partition(items: MutableSequence[Any], start: int, end: int) -> int:
    pivot = items[start]
    smaller = sum(1 for index in range(start + 1, end + 1) if items[index] <= pivot)
    pivot_index = start + smaller
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quicksort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, pivoting on the first element of each range."""
    ranges = [(0, len(items) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        ranges.append((pivot + 1, end))
        ranges.append((start, pivot - 1))


class DynamicBag:
    """A multiset that keeps items in insertion order until sorted."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, position: int) -> Any:
        return self._items[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicBag):
            return NotImplemented
        return self._items == other._items

    def __add__(self, other: DynamicBag) -> DynamicBag:
        if not isinstance(other, DynamicBag):
            return NotImplemented
        return DynamicBag([*self._items, *other._items])

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self._items)

    def __repr__(self) -> str:
        return f"DynamicBag({self._items!r})"

    def insert(self, item: Any) -> None:
        """Add one copy of ``item``."""
        self._items.append(item)

    def count(self, item: Any) -> int:
        """Return how many times ``item`` is in the bag."""
        return sum(1 for entry in self._items if entry == item)

    def erase_one(self, item: Any) -> bool:
        """Remove the first copy of ``item``; return whether one was found."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def erase(self, item: Any) -> int:
        """Remove every copy of ``item`` and return how many were removed."""
        removed = 0
        while self.erase_one(item):
            removed += 1
        return removed

    def sort(self) -> None:
        """Put the items in ascending order."""
        quicksort(self._items)