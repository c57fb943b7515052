"""Array-backed list of records with instrumented operations and sorts."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from listabench.records import Metrics, Record, read_records, write_records


class SequentialList:
    """Contiguous list of records; every operation returns its Metrics."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._items: list[Record] = list(records)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._items)

    def _check_not_empty(self) -> None:
        if not self._items:
            raise IndexError("list is empty")

    def insert_first(self, name: str, rg: int) -> Metrics:
        metrics = Metrics(moves=len(self._items) + 1)
        self._items.insert(0, Record(name, rg))
        return metrics.finish()

    def insert_last(self, name: str, rg: int) -> Metrics:
        metrics = Metrics(moves=1)
        self._items.append(Record(name, rg))
        return metrics.finish()

    def insert_at(self, name: str, rg: int, pos: int) -> Metrics:
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"position {pos} out of range")
        metrics = Metrics(moves=len(self._items) - pos + 1)
        self._items.insert(pos, Record(name, rg))
        return metrics.finish()

    def remove_first(self) -> Metrics:
        self._check_not_empty()
        metrics = Metrics(moves=len(self._items) - 1)
        del self._items[0]
        return metrics.finish()

    def remove_last(self) -> Metrics:
        self._check_not_empty()
        metrics = Metrics()
        self._items.pop()
        return metrics.finish()

    def remove_at(self, pos: int) -> Metrics:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")
        metrics = Metrics(moves=len(self._items) - pos - 1)
        del self._items[pos]
        return metrics.finish()

    def search(self, rg: int) -> Metrics | None:
        """Linear search; None when no record has this RG."""
        metrics = Metrics()
        for index, item in enumerate(self._items):
            metrics.comparisons += 1
            if item.rg == rg:
                return metrics.finish(index)
        return None

    def binary_search(self, rg: int) -> Metrics | None:
        """Binary search on a list sorted by RG; None when absent."""
        metrics = Metrics()
        lo, hi = 0, len(self._items) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            metrics.comparisons += 1
            current = self._items[mid].rg
            if current == rg:
                return metrics.finish(mid)
            if current < rg:
                lo = mid + 1
            else:
                hi = mid - 1
        return None

    def selection_sort(self) -> Metrics:
        metrics = Metrics()
        a = self._items
        n = len(a)
        for i in range(n - 1):
            smallest = i
            for j in range(i + 1, n):
                metrics.comparisons += 1
                if a[j].rg < a[smallest].rg:
                    smallest = j
            if smallest != i:
                a[i], a[smallest] = a[smallest], a[i]
                metrics.moves += 3
        return metrics.finish()

    def insertion_sort(self) -> Metrics:
        metrics = Metrics()
        a = self._items
        for i in range(1, len(a)):
            key = a[i]
            metrics.moves += 1
            j = i - 1
            while j >= 0:
                metrics.comparisons += 1
                if a[j].rg > key.rg:
                    a[j + 1] = a[j]
                    metrics.moves += 1
                    j -= 1
                else:
                    break
            a[j + 1] = key
            metrics.moves += 1
        return metrics.finish()

    def bubble_sort(self) -> Metrics:
        metrics = Metrics()
        a = self._items
        n = len(a)
        for i in range(n - 1):
            for j in range(n - 1 - i):
                metrics.comparisons += 1
                if a[j].rg > a[j + 1].rg:
                    a[j], a[j + 1] = a[j + 1], a[j]
                    metrics.moves += 3
        return metrics.finish()

    def shell_sort(self) -> Metrics:
        metrics = Metrics()
        a = self._items
        n = len(a)
        gap = n // 2
        while gap > 0:
            for i in range(gap, n):
                held = a[i]
                metrics.moves += 1
                j = i
                while j >= gap:
                    metrics.comparisons += 1
                    if a[j - gap].rg > held.rg:
                        a[j] = a[j - gap]
                        metrics.moves += 1
                        j -= gap
                    else:
                        break
                a[j] = held
                metrics.moves += 1
            gap //= 2
        return metrics.finish()

    def quick_sort(self) -> Metrics:
        metrics = Metrics()
        a = self._items
        pending = [(0, len(a) - 1)]
        while pending:
            low, high = pending.pop()
            if low < high:
                pivot_index = _partition(a, low, high, metrics)
                pending.append((pivot_index + 1, high))
                pending.append((low, pivot_index - 1))
        return metrics.finish()

    def merge_sort(self) -> Metrics:
        metrics = Metrics()
        _merge_sort(self._items, 0, len(self._items) - 1, metrics)
        return metrics.finish()

    def save(self, path: str | os.PathLike[str]) -> None:
        write_records(self._items, path)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the contents with the file's records; a missing file changes nothing."""
        try:
            records = read_records(path)
        except FileNotFoundError:
            return
        self._items = records


def _partition(a: list[Record], low: int, high: int, metrics: Metrics) -> int:
    pivot = a[high]
    metrics.moves += 1
    i = low - 1
    for j in range(low, high):
        metrics.comparisons += 1
        if a[j].rg <= pivot.rg:
            i += 1
            a[i], a[j] = a[j], a[i]
            metrics.moves += 3
    a[i + 1], a[high] = a[high], a[i + 1]
    metrics.moves += 3
    return i + 1


def _merge_sort(a: list[Record], left: int, right: int, metrics: Metrics) -> None:
    if left < right:
        mid = left + (right - left) // 2
        _merge_sort(a, left, mid, metrics)
        _merge_sort(a, mid + 1, right, metrics)
        _merge(a, left, mid, right, metrics)


def _merge(a: list[Record], left: int, mid: int, right: int, metrics: Metrics) -> None:
    first = a[left : mid + 1]
    second = a[mid + 1 : right + 1]
    metrics.moves += len(first) + len(second)
    i = j = 0
    k = left
    while i < len(first) and j < len(second):
        metrics.comparisons += 1
        if first[i].rg <= second[j].rg:
            a[k] = first[i]
            i += 1
        else:
            a[k] = second[j]
            j += 1
        k += 1
        metrics.moves += 1
    rest = first[i:] + second[j:]
    a[k : k + len(rest)] = rest
    metrics.moves += len(rest)