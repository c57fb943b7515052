"""Singly linked list of records with instrumented operations."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from listabench.records import Metrics, Record, read_records, write_records


@dataclass
class _Node:
    record: Record
    next: _Node | None = None


class LinkedList:
    """Linked list of records; operations return Metrics with the position touched."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for record in records:
            node = _Node(record)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Record]:
        return (node.record for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def insert_first(self, name: str, rg: int) -> Metrics:
        metrics = Metrics(moves=2)
        self._head = _Node(Record(name, rg), self._head)
        self._size += 1
        return metrics.finish(0)

    def insert_last(self, name: str, rg: int) -> Metrics:
        metrics = Metrics(moves=2)
        node = _Node(Record(name, rg))
        if self._head is None:
            self._head = node
            self._size += 1
            return metrics.finish(0)
        current = self._head
        steps = 0
        while current.next is not None:
            current = current.next
            metrics.comparisons += 1
            steps += 1
        current.next = node
        self._size += 1
        return metrics.finish(steps + 1)

    def insert_at(self, name: str, rg: int, pos: int) -> Metrics:
        if not 0 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range")
        if pos == 0:
            return self.insert_first(name, rg)
        metrics = Metrics(moves=2)
        current = self._head
        for _ in range(pos - 1):
            current = current.next
            metrics.comparisons += 1
        current.next = _Node(Record(name, rg), current.next)
        self._size += 1
        return metrics.finish(pos)

    def remove_first(self) -> Metrics | None:
        """Drop the head; None when the list is empty."""
        if self._head is None:
            return None
        metrics = Metrics(moves=1)
        self._head = self._head.next
        self._size -= 1
        return metrics.finish(0)

    def remove_last(self) -> Metrics | None:
        """Drop the tail; None when the list is empty."""
        if self._head is None:
            return None
        metrics = Metrics()
        previous: _Node | None = None
        current = self._head
        steps = 0
        while current.next is not None:
            previous, current = current, current.next
            metrics.comparisons += 1
            steps += 1
        if previous is None:
            self._head = None
        else:
            previous.next = None
            metrics.moves += 1
        self._size -= 1
        return metrics.finish(steps)

    def remove_at(self, pos: int) -> Metrics | None:
        """Drop the node at pos; None when pos is past the end."""
        if pos < 0:
            raise IndexError(f"position {pos} out of range")
        if pos == 0:
            return self.remove_first()
        if pos >= self._size:
            return None
        metrics = Metrics(moves=1, comparisons=1)
        previous = self._head
        for _ in range(pos - 1):
            previous = previous.next
            metrics.comparisons += 1
        previous.next = previous.next.next
        self._size -= 1
        return metrics.finish(pos)

    def search(self, rg: int) -> Metrics | None:
        """Linear search; None when no record has this RG."""
        metrics = Metrics()
        for index, node in enumerate(self._nodes()):
            metrics.comparisons += 1
            if node.record.rg == rg:
                return metrics.finish(index)
        return None

    def save(self, path: str | os.PathLike[str]) -> None:
        write_records(self, path)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> LinkedList:
        """Build a list from a file; a missing file gives an empty list."""
        try:
            records = read_records(path)
        except FileNotFoundError:
            records = []
        return cls(records)