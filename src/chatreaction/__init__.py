"""
ChatReaction: a mock chat with timed bot replies and emoji reactions.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .config import ChatSettings
from .conversation import (
    ChatSession,
    InvalidMessageIndexError,
    ManualScheduler,
    Message,
    MessageStore,
    Reaction,
)

__all__ = [
    "ChatSession",
    "ChatSettings",
    "InvalidMessageIndexError",
    "ManualScheduler",
    "Message",
    "MessageStore",
    "Reaction",
]
