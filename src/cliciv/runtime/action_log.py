"""Run-length compacted action history.

Consecutive identical actions are stored once with a repeat count, so a save
that idled a thousand times holds one entry instead of a thousand. The log is
the only record needed to rebuild a state from genesis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple

from ..actions import Action


class LogEntry(NamedTuple):
    action: Action
    count: int


@dataclass(frozen=True, slots=True)
class ActionLog:
    entries: Tuple[LogEntry, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[object]]) -> "ActionLog":
        """Build a log from ``(action, count)`` pairs, merging adjacent duplicates."""

        log = cls()
        for action, count in pairs:
            if not isinstance(count, int) or isinstance(count, bool) or count < 1:
                raise ValueError(f"log entry count must be a positive integer, got {count!r}")
            log = log.append(action, count)  # type: ignore[arg-type]
        return log

    def append(self, action: Action, count: int = 1) -> "ActionLog":
        if self.entries and self.entries[-1].action == action:
            last = self.entries[-1]
            return ActionLog(self.entries[:-1] + (LogEntry(action, last.count + count),))
        return ActionLog(self.entries + (LogEntry(action, count),))

    def actions(self) -> Iterator[Action]:
        """Every logged action in order, with repeats expanded."""

        for entry in self.entries:
            for _ in range(entry.count):
                yield entry.action

    def total(self) -> int:
        return sum(entry.count for entry in self.entries)

    def tail(self, limit: int) -> Tuple[LogEntry, ...]:
        if limit <= 0:
            return ()
        return self.entries[-limit:]

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["ActionLog", "LogEntry"]
