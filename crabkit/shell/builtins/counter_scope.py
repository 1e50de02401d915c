"""A set of counters that keep per-file and overall results."""

from __future__ import annotations

from .counters import Counter


class TotalCounter(Counter):
    """Wraps a counter and keeps the aggregate of every reset result."""

    def __init__(self, counter: Counter) -> None:
        self._counter = counter
        self._total = 0

    def count(self, ch: str) -> None:
        self._counter.count(ch)

    def get(self) -> int:
        return self._counter.get()

    def reset(self) -> None:
        self._total = self.aggregate(self._total, self._counter.get())
        self._counter.reset()

    def aggregate(self, a: int, b: int) -> int:
        return self._counter.aggregate(a, b)

    def total(self) -> int:
        """Aggregate of all past results and the current one."""
        return self.aggregate(self._total, self._counter.get())


class CounterScope:
    """Feeds each character to an ordered list of counters."""

    def __init__(self) -> None:
        self._counters: list[TotalCounter] = []

    def add_counter(self, counter_type: type[Counter]) -> None:
        self._counters.append(TotalCounter(counter_type()))

    def count(self, ch: str) -> None:
        for counter in self._counters:
            counter.count(ch)

    def reset(self) -> list[int]:
        """Return the current results and start counting afresh."""
        results = [counter.get() for counter in self._counters]
        for counter in self._counters:
            counter.reset()
        return results

    def total(self) -> list[int]:
        return [counter.total() for counter in self._counters]

    def is_empty(self) -> bool:
        return not self._counters