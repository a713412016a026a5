"""Simulated counterpart for the mock conversation.

Two triggers append non-user messages to the store:
- Echo reply: a one-shot acknowledgement after each user message
- Periodic message: a repeating timer posting a random canned sentence

Both run as scheduler callbacks on the same loop as user actions,
so no locking is needed.
"""

import random
from collections.abc import Callable, Sequence
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from ..config import (
    ACKNOWLEDGEMENT,
    ECHO_DELAY_SECONDS,
    FALLBACK_GREETING,
    MESSAGE_INTERVAL_SECONDS,
    SAMPLE_RESPONSES,
)
from .models import Message
from .scheduler import Scheduler, TaskHandle
from .store import MessageStore

T = TypeVar("T")


def pick_random(pool: Sequence[T], rng: random.Random) -> T:
    """Pick one entry of ``pool`` uniformly at random.

    Raises:
        ValueError: If the pool is empty
    """
    if not pool:
        raise ValueError("Cannot pick from an empty pool")
    return pool[rng.randrange(len(pool))]


class ResponderState(str, Enum):
    """Periodic trigger state."""

    STOPPED = "stopped"
    ACTIVE = "active"


class BotResponder:
    """Appends scripted and random counterpart messages to a store.

    Example:
        responder = BotResponder(store, ManualScheduler())
        responder.start()
        responder.schedule_echo()
    """

    def __init__(
        self,
        store: MessageStore,
        scheduler: Scheduler,
        *,
        echo_delay: float = ECHO_DELAY_SECONDS,
        message_interval: float = MESSAGE_INTERVAL_SECONDS,
        acknowledgement: str = ACKNOWLEDGEMENT,
        sample_responses: Sequence[str] = SAMPLE_RESPONSES,
        rng: random.Random | None = None,
        cancel_pending_on_stop: bool = True,
        clock: Callable[[], datetime] = datetime.now,
        debug_callback: Any | None = None,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._echo_delay = echo_delay
        self._message_interval = message_interval
        self._acknowledgement = acknowledgement
        self._pool = tuple(sample_responses)
        self._rng = rng or random.Random()
        self._cancel_pending_on_stop = cancel_pending_on_stop
        self._clock = clock
        self._debug_callback = debug_callback

        self._state = ResponderState.STOPPED
        self._timer: TaskHandle | None = None
        self._pending_echoes: list[TaskHandle] = []

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback (level, component, message)."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Responder", message)

    @property
    def state(self) -> ResponderState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is ResponderState.ACTIVE

    @property
    def pending_echoes(self) -> int:
        """Echo replies that are armed but have not fired yet."""
        return sum(1 for handle in self._pending_echoes if not handle.cancelled)

    def start(self) -> None:
        """Arm the periodic-message timer. No-op when already active."""
        if self.is_active:
            self._debug("debug", "start() ignored, already active")
            return
        self._timer = self._scheduler.call_every(self._message_interval, self.post_random_message)
        self._state = ResponderState.ACTIVE
        self._debug("info", f"Periodic messages every {self._message_interval:g}s")

    def stop(self) -> None:
        """Cancel the periodic-message timer. No-op when already stopped.

        Pending echo replies are cancelled too unless the responder was
        created with ``cancel_pending_on_stop=False``.
        """
        if not self.is_active:
            self._debug("debug", "stop() ignored, already stopped")
            return
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._state = ResponderState.STOPPED

        if self._cancel_pending_on_stop:
            cancelled = self.pending_echoes
            for handle in self._pending_echoes:
                handle.cancel()
            self._pending_echoes.clear()
            if cancelled:
                self._debug("info", f"Cancelled {cancelled} pending echo repl{'y' if cancelled == 1 else 'ies'}")
        self._debug("info", "Periodic messages stopped")

    def schedule_echo(self) -> TaskHandle:
        """Schedule the acknowledgement for a user message."""
        handle: TaskHandle | None = None

        def _fire() -> None:
            if handle in self._pending_echoes:
                self._pending_echoes.remove(handle)
            self._append(self._acknowledgement)

        handle = self._scheduler.call_later(self._echo_delay, _fire)
        self._pending_echoes.append(handle)
        self._debug("debug", f"Echo reply due in {self._echo_delay:g}s")
        return handle

    def post_random_message(self) -> Message:
        """Append one canned sentence as a counterpart message."""
        content = pick_random(self._pool, self._rng) if self._pool else FALLBACK_GREETING
        return self._append(content)

    def _append(self, content: str) -> Message:
        message = Message(content=content, is_from_user=False, timestamp=self._clock())
        self._store.append(message)
        return message
