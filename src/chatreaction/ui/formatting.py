"""Text formatting utilities for the TUI.

Hides the details of how messages and reactions are turned into text.
"""

from rich.text import Text

from ..conversation.models import Message
from .config import BOT_LABEL, MESSAGE_TIMESTAMP_FORMAT, USER_LABEL


def format_header(message: Message) -> str:
    """Sender label and time, e.g. ``You · 14:02``."""
    sender = USER_LABEL if message.is_from_user else BOT_LABEL
    return f"{sender} · {message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)}"


def format_reactions(reactions: tuple[str, ...] | list[str]) -> str:
    """Reaction row shown under a bubble, in attach order.

    Duplicates are shown as they were added.
    """
    return " ".join(reactions)


def format_content(content: str) -> Text:
    """Message text as a plain Rich ``Text`` so brackets are never read as markup."""
    return Text(content)


def truncate(text: str, limit: int) -> str:
    """Shorten ``text`` to ``limit`` characters with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."
