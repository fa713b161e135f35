"""Call counting and timing of named code sections."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

_LOW_MASK = 0xFFFFFFFF
_DEFAULT_FREQUENCY = 1_000_000_000


@dataclass
class ProfileEntry:
    """Counters kept for one named section."""

    name: str
    count: int = 0
    total: int = 0
    last_start: int = 0

    @property
    def total_high(self) -> int:
        """Upper 32 bits of the accumulated tick count."""
        return self.total >> 32

    @property
    def total_low(self) -> int:
        """Lower 32 bits of the accumulated tick count."""
        return self.total & _LOW_MASK


class Profiler:
    """Counts entries into named sections and sums the ticks spent in them.

    ``clock`` is a callable returning a tick count. Its tick frequency is
    read from a ``frequency`` attribute when it has one; without a clock,
    a nanosecond counter is used.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        if clock is None:
            clock = time.perf_counter_ns
        self.clock = clock
        self.frequency: int = getattr(clock, "frequency", _DEFAULT_FREQUENCY)
        self.entries: dict[str, ProfileEntry] = {}

    def start(self, name: str) -> None:
        """Record entry into section ``name`` and note the start time."""
        entry = self.entries.get(name)
        if entry is None:
            entry = self.entries[name] = ProfileEntry(name)
        entry.count += 1
        entry.last_start = self.clock()

    def end(self, name: str) -> None:
        """Add the ticks since the last start of ``name`` to its total.

        A section that was never started is ignored.
        """
        if not self.entries:
            return
        now = self.clock()
        entry = self.entries.get(name)
        if entry is None:
            return
        entry.total += now - entry.last_start

    def report(self) -> str:
        """Return the frequency line and one line per section, in first-seen order."""
        lines = [f"Freq={self.frequency}"]
        lines.extend(
            f"{entry.name}: calls={entry.count},total={entry.total_high},{entry.total_low}"
            for entry in self.entries.values()
        )
        return "\n".join(lines) + "\n"