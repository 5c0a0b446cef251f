# scheduler.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

Command = Callable[[], None]


@dataclass
class ScheduledCommand:
    name: str
    period_ms: int
    command: Command
    next_due: int              # ms timestamp of the next firing


class Scheduler:
    """
    Fixed-period command scheduler driven by an external millisecond clock.

    The driver calls advance(now_ms) once per frame; every command fires once
    for each full period that has elapsed, so a slow frame is caught up
    rather than dropped. When several commands are due in the same call they
    run in due-time order (registration order breaks ties).
    """

    def __init__(self, now_ms: int = 0):
        self.now_ms = now_ms
        self.entries: List[ScheduledCommand] = []

    def every(self, period_ms: int, command: Command, name: Optional[str] = None) -> ScheduledCommand:
        if not isinstance(period_ms, int) or period_ms <= 0:
            raise ValueError(f"period_ms must be a positive int, got {period_ms!r}")
        entry = ScheduledCommand(
            name=name or getattr(command, "__name__", "command"),
            period_ms=period_ms,
            command=command,
            next_due=self.now_ms + period_ms,
        )
        self.entries.append(entry)
        logger.debug("Scheduled %s every %d ms", entry.name, period_ms)
        return entry

    def advance(self, now_ms: int) -> int:
        """Run everything due up to now_ms. Returns how many commands fired."""
        if now_ms < self.now_ms:
            raise ValueError(f"clock went backwards: {now_ms} < {self.now_ms}")
        self.now_ms = now_ms

        fired = 0
        while True:
            due = [e for e in self.entries if e.next_due <= now_ms]
            if not due:
                return fired
            entry = min(due, key=lambda e: e.next_due)
            entry.next_due += entry.period_ms
            entry.command()
            fired += 1

    def reset(self, now_ms: int) -> None:
        """Re-arm every entry so its next firing is one period after now_ms."""
        self.now_ms = now_ms
        for entry in self.entries:
            entry.next_due = now_ms + entry.period_ms
