"""Person records, operation metrics and the ``name,rg`` text file format."""

from __future__ import annotations

import os
import re
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

MAX_NAME = 50
NAME_LIMIT = MAX_NAME - 1

_ENTRY = re.compile(rf"\s*([^,]{{1,{NAME_LIMIT}}}),\s*([+-]?\d+)")


@dataclass(frozen=True)
class Record:
    """A person identified by name and RG number."""

    name: str
    rg: int

    def __post_init__(self) -> None:
        if len(self.name) > NAME_LIMIT:
            object.__setattr__(self, "name", self.name[:NAME_LIMIT])


@dataclass
class Metrics:
    """Counts of key comparisons and data moves made by one operation."""

    comparisons: int = 0
    moves: int = 0
    position: int | None = None
    elapsed: float = 0.0
    _start: float = field(default_factory=time.perf_counter, repr=False, compare=False)

    def finish(self, position: int | None = None) -> Metrics:
        """Stop the clock, record the position touched and return self."""
        self.elapsed = time.perf_counter() - self._start
        if position is not None:
            self.position = position
        return self

    def report(self, label: str) -> str:
        """Render the metrics as a one-line summary."""
        text = (
            f"{label} ⇒ C(n)={self.comparisons}, M(n)={self.moves}, "
            f"tempo={self.elapsed:.6f}s"
        )
        if self.position is not None:
            text += f", pos={self.position}"
        return text


def format_record(record: Record) -> str:
    """Return the ``name,rg`` line for a record, without a newline."""
    return f"{record.name},{record.rg}"


def read_records(path: str | os.PathLike[str]) -> list[Record]:
    """Read ``name,rg`` entries until the first one that does not parse."""
    text = Path(path).read_text(encoding="utf-8")
    records: list[Record] = []
    offset = 0
    while match := _ENTRY.match(text, offset):
        records.append(Record(match[1], int(match[2])))
        offset = match.end()
    return records


def write_records(records: Iterable[Record], path: str | os.PathLike[str]) -> None:
    """Write one ``name,rg`` line per record, replacing the file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(format_record(record) + "\n" for record in records)