"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel threshold. A lower value shows more entries."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Level for a ``debug_callback`` level name; unknown names map to DEBUG."""
        return cls.__members__.get(level.upper(), cls.DEBUG)

    @classmethod
    def label(cls, level: int) -> str:
        """Display name for a numeric level."""
        try:
            return cls(level).name
        except ValueError:
            return "UNKNOWN"


# Chat display configuration
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"
USER_LABEL = "You"
BOT_LABEL = "Bot"
INPUT_PLACEHOLDER = "Type a message..."

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Reaction picker
REACTION_PREVIEW_LENGTH = 80  # Characters of the message shown in the picker
