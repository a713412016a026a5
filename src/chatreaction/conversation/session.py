"""Application state for one chat screen.

Owns the message store, the input buffer and the bot responder, and
exposes the user actions and lifecycle hooks the presentation layer
calls. Nothing here knows about Textual.
"""

import random
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..config import ChatSettings
from .models import Message, Reaction
from .responder import BotResponder
from .scheduler import Scheduler
from .seed import mock_conversation
from .store import MessageStore


class ChatSession:
    """A single mock conversation.

    Example:
        session = ChatSession(ManualScheduler())
        session.activate()
        session.input_text = "Hi!"
        session.send_message()
    """

    def __init__(
        self,
        scheduler: Scheduler,
        settings: ChatSettings | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
        seed_conversation: bool = True,
        debug_callback: Any | None = None,
    ) -> None:
        self._settings = settings or ChatSettings()
        self._clock = clock
        self._seed_conversation = seed_conversation
        self._seeded = False
        self._debug_callback = debug_callback

        self.input_text = ""
        self.store = MessageStore(debug_callback=debug_callback)
        self.responder = BotResponder(
            self.store,
            scheduler,
            echo_delay=self._settings.echo_delay,
            message_interval=self._settings.message_interval,
            acknowledgement=self._settings.acknowledgement,
            sample_responses=self._settings.sample_responses,
            rng=random.Random(self._settings.random_seed),
            cancel_pending_on_stop=self._settings.cancel_pending_on_stop,
            clock=clock,
            debug_callback=debug_callback,
        )

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback and propagate it to the store and responder."""
        self._debug_callback = callback
        self.store.set_debug_callback(callback)
        self.responder.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    @property
    def settings(self) -> ChatSettings:
        return self._settings

    @property
    def is_active(self) -> bool:
        return self.responder.is_active

    def activate(self) -> None:
        """Seed the conversation (first time only) and start the responder."""
        if self._seed_conversation and not self._seeded:
            self.store.extend(mock_conversation(self._clock()))
            self._debug("info", f"Seeded {len(self.store)} messages")
        self._seeded = True
        self.responder.start()

    def deactivate(self) -> None:
        """Stop the responder."""
        self.responder.stop()

    def send_message(self, text: str | None = None) -> Message | None:
        """Submit a user message.

        Uses ``text`` when given, otherwise the input buffer. Empty text is
        ignored. On success the buffer is cleared and an echo reply is
        scheduled.

        Returns:
            The appended message, or None if nothing was sent
        """
        content = self.input_text if text is None else text
        if not content:
            self._debug("debug", "Empty submission ignored")
            return None

        message = Message(content=content, is_from_user=True, timestamp=self._clock())
        self.store.append(message)
        self.responder.schedule_echo()
        self.input_text = ""
        return message

    def react(self, index: int, reaction: Reaction | str) -> Message:
        """Attach a reaction to the message at ``index``.

        Raises:
            InvalidMessageIndexError: If no message exists at ``index``
        """
        tag = reaction.value if isinstance(reaction, Reaction) else reaction
        return self.store.attach_reaction(index, tag)
