"""Exceptions raised by the conversation core."""


class ConversationError(Exception):
    """Base class for conversation errors."""


class InvalidMessageIndexError(ConversationError, IndexError):
    """A message position does not exist in the store."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Invalid message index {index} (store has {size} messages)")
        self.index = index
        self.size = size
