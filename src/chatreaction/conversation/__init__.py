"""Conversation core for chatreaction.

Holds the message state and the simulated counterpart, independent of
any user interface.
"""

from .errors import ConversationError, InvalidMessageIndexError
from .models import Message, MessageAppended, Reaction, ReactionAttached, StoreEvent
from .responder import BotResponder, ResponderState, pick_random
from .scheduler import ManualScheduler, Scheduler, TaskHandle
from .seed import mock_conversation
from .session import ChatSession
from .store import MessageStore

__all__ = [
    "BotResponder",
    "ChatSession",
    "ConversationError",
    "InvalidMessageIndexError",
    "ManualScheduler",
    "Message",
    "MessageAppended",
    "MessageStore",
    "Reaction",
    "ReactionAttached",
    "ResponderState",
    "Scheduler",
    "StoreEvent",
    "TaskHandle",
    "mock_conversation",
    "pick_random",
]
