"""Scheduler adapter over Textual timers.

Callbacks run on the app's event loop, interleaved with user input.
"""

from typing import TYPE_CHECKING

from ..conversation.scheduler import Callback, Scheduler, TaskHandle

if TYPE_CHECKING:
    from textual.message_pump import MessagePump
    from textual.timer import Timer


class TextualTaskHandle(TaskHandle):
    """Task handle wrapping a Textual ``Timer``."""

    def __init__(self, timer: "Timer") -> None:
        self._timer = timer
        self._cancelled = False

    def cancel(self) -> None:
        if not self._cancelled:
            self._timer.stop()
            self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class TextualScheduler(Scheduler):
    """Schedules callbacks with ``set_timer`` / ``set_interval`` on a widget or app."""

    def __init__(self, owner: "MessagePump") -> None:
        self._owner = owner

    def call_later(self, delay: float, callback: Callback) -> TextualTaskHandle:
        return TextualTaskHandle(self._owner.set_timer(delay, callback))

    def call_every(self, interval: float, callback: Callback) -> TextualTaskHandle:
        return TextualTaskHandle(self._owner.set_interval(interval, callback))
