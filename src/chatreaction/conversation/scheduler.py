"""Timer abstraction for delayed and repeating callbacks.

This module hides the design decisions about:
- How one-shot and repeating callbacks are armed
- How a pending callback is cancelled
- Which clock drives them (a UI event loop or a virtual clock)

The TUI supplies an adapter over Textual timers (see ``ui/scheduler.py``).
``ManualScheduler`` runs on a virtual clock for tests and headless runs.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

Callback = Callable[[], None]


class TaskHandle(ABC):
    """Handle to a scheduled callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the callback from firing again. Safe to call twice."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """True once ``cancel`` has been called."""


class Scheduler(ABC):
    """Abstract scheduler for cooperative, single-loop callbacks."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callback) -> TaskHandle:
        """Run ``callback`` once after ``delay`` seconds."""

    @abstractmethod
    def call_every(self, interval: float, callback: Callback) -> TaskHandle:
        """Run ``callback`` every ``interval`` seconds until cancelled."""


@dataclass(order=True)
class _Entry:
    due: float
    seq: int
    handle: "ManualTaskHandle" = field(compare=False)


class ManualTaskHandle(TaskHandle):
    """Task handle owned by a ``ManualScheduler``."""

    def __init__(self, callback: Callback, interval: float | None = None) -> None:
        self.callback = callback
        self.interval = interval
        self.fired = 0
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def repeating(self) -> bool:
        return self.interval is not None


class ManualScheduler(Scheduler):
    """Scheduler driven by a virtual clock.

    Time only moves when ``advance`` is called. Due callbacks run
    synchronously in due-time order; ties run in scheduling order.

    Example:
        scheduler = ManualScheduler()
        scheduler.call_later(1.0, lambda: print("fired"))
        scheduler.advance(1.0)  # prints "fired"
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[_Entry] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of armed, non-cancelled callbacks."""
        return sum(1 for entry in self._queue if not entry.handle.cancelled)

    def call_later(self, delay: float, callback: Callback) -> ManualTaskHandle:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        handle = ManualTaskHandle(callback)
        self._push(self._now + delay, handle)
        return handle

    def call_every(self, interval: float, callback: Callback) -> ManualTaskHandle:
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        handle = ManualTaskHandle(callback, interval=interval)
        self._push(self._now + interval, handle)
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Args:
            seconds: How far to move the virtual clock

        Returns:
            Number of callbacks that ran
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds})")
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            handle = entry.handle
            if handle.cancelled:
                continue
            self._now = entry.due
            if handle.repeating:
                self._push(entry.due + handle.interval, handle)
            handle.fired += 1
            handle.callback()
            ran += 1
        self._now = target
        return ran

    def _push(self, due: float, handle: ManualTaskHandle) -> None:
        heapq.heappush(self._queue, _Entry(due, next(self._seq), handle))
