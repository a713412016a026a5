"""Data models for the conversation.

These models define the structure of chat messages and reactions,
independent of how they are displayed.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


class Reaction(str, Enum):
    """Reaction choices offered in the message context menu."""

    LOVE = "❤️"
    LIKE = "👍"
    LAUGH = "😂"
    WOW = "😮"

    @property
    def label(self) -> str:
        """Human-readable name shown next to the emoji."""
        return self.name.capitalize()


class Message(BaseModel):
    """A single chat entry.

    Messages are immutable. Reactions are added by replacing the record
    with a copy (see ``with_reaction``), so the id never changes.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    content: str = Field(description="Text payload")
    is_from_user: bool = Field(description="True for the local user, False for the counterpart")
    timestamp: datetime = Field(default_factory=datetime.now)
    reactions: tuple[str, ...] = Field(default=(), description="Reaction tags in attach order")

    model_config = {"frozen": True}

    def with_reaction(self, tag: str) -> "Message":
        """Return a copy of this message with ``tag`` appended to its reactions."""
        return self.model_copy(update={"reactions": (*self.reactions, tag)})


@dataclass(frozen=True)
class MessageAppended:
    """Store event: a message was added at ``index``."""

    index: int
    message: Message


@dataclass(frozen=True)
class ReactionAttached:
    """Store event: ``tag`` was attached to the message at ``index``."""

    index: int
    message: Message
    tag: str


StoreEvent = MessageAppended | ReactionAttached
