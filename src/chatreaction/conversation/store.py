"""In-memory message store.

Hides the representation of the conversation:
- Ordered, append-only message sequence
- Reaction attachment by position
- Observer notification after each mutation

The store has no persistence. It is discarded with its session.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import InvalidMessageIndexError
from .models import Message, MessageAppended, ReactionAttached, StoreEvent

StoreListener = Callable[[StoreEvent], None]


class MessageStore:
    """Ordered, append-only sequence of chat messages.

    Iteration order is insertion order and doubles as display order.
    Listeners are called synchronously after every mutation.
    """

    def __init__(self, debug_callback: Any | None = None) -> None:
        self._messages: list[Message] = []
        self._listeners: list[StoreListener] = []
        self._debug_callback = debug_callback

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Store", message)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        self._check_index(index)
        return self._messages[index]

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of all messages in display order."""
        return tuple(self._messages)

    @property
    def last(self) -> Message | None:
        """Most recently appended message, if any."""
        return self._messages[-1] if self._messages else None

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener for store events.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def append(self, message: Message) -> int:
        """Append a message to the end of the conversation.

        Returns:
            Index of the appended message
        """
        self._messages.append(message)
        index = len(self._messages) - 1
        sender = "user" if message.is_from_user else "bot"
        self._debug("debug", f"Appended #{index} from {sender}: {message.content[:40]!r}")
        self._notify(MessageAppended(index=index, message=message))
        return index

    def extend(self, messages: Iterable[Message]) -> None:
        """Append several messages in order."""
        for message in messages:
            self.append(message)

    def attach_reaction(self, index: int, tag: str) -> Message:
        """Append a reaction tag to the message at ``index``.

        Args:
            index: Position of the message in the store
            tag: Reaction tag (usually an emoji)

        Returns:
            The updated message

        Raises:
            InvalidMessageIndexError: If no message exists at ``index``
        """
        self._check_index(index)
        updated = self._messages[index].with_reaction(tag)
        self._messages[index] = updated
        self._debug("debug", f"Reaction {tag} attached to #{index}")
        self._notify(ReactionAttached(index=index, message=updated, tag=tag))
        return updated

    def _check_index(self, index: int) -> None:
        # Negative positions are rejected rather than wrapped
        if not 0 <= index < len(self._messages):
            self._debug("error", f"Invalid message index {index}")
            raise InvalidMessageIndexError(index, len(self._messages))

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
