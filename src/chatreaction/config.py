"""Runtime configuration.

Centralizes timing constants and canned text for the simulated
counterpart, and reads overrides from the environment.

Environment variables (a ``.env`` file is loaded first):
    CHATREACTION_ECHO_DELAY: Seconds before the acknowledgement (default: 1.0)
    CHATREACTION_MESSAGE_INTERVAL: Seconds between random messages (default: 5.0)
    CHATREACTION_SEED: Seed for random message selection (default: unseeded)
    CHATREACTION_CANCEL_PENDING: Cancel pending acknowledgements on teardown (default: true)
    CHATREACTION_LOG_LEVEL: Show the log panel at this level (default: hidden)
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ECHO_DELAY_SECONDS = 1.0  # One-shot acknowledgement delay
MESSAGE_INTERVAL_SECONDS = 5.0  # Periodic random message interval

ACKNOWLEDGEMENT = "Thanks for your message!"
FALLBACK_GREETING = "Hello there!"  # Used when the sample pool is empty

SAMPLE_RESPONSES: tuple[str, ...] = (
    "How's your day going?",
    "That's interesting!",
    "Tell me more about that.",
    "I see what you mean.",
    "That's a great point!",
    "What do you think about that?",
)

LOG_LEVELS = ("debug", "info", "warning", "error")


class ChatSettings(BaseModel):
    """Settings for a chat session."""

    echo_delay: float = Field(default=ECHO_DELAY_SECONDS, gt=0, description="Acknowledgement delay (s)")
    message_interval: float = Field(default=MESSAGE_INTERVAL_SECONDS, gt=0, description="Random message interval (s)")
    acknowledgement: str = Field(default=ACKNOWLEDGEMENT)
    sample_responses: tuple[str, ...] = Field(default=SAMPLE_RESPONSES)
    random_seed: int | None = Field(default=None, description="Seed for reproducible random messages")
    cancel_pending_on_stop: bool = Field(
        default=True,
        description="Cancel pending acknowledgements when the view is deactivated",
    )
    log_level: str | None = Field(default=None, description="Log panel level, None to hide")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}. Use one of: {', '.join(LOG_LEVELS)}")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "ChatSettings":
        """Build settings from environment variables.

        Args:
            **overrides: Values that take precedence over the environment
                (None values are ignored)

        Raises:
            pydantic.ValidationError: If a value is invalid
        """
        load_dotenv(find_dotenv(usecwd=True))

        values: dict = {}
        if (delay := os.getenv("CHATREACTION_ECHO_DELAY")) is not None:
            values["echo_delay"] = delay
        if (interval := os.getenv("CHATREACTION_MESSAGE_INTERVAL")) is not None:
            values["message_interval"] = interval
        if (seed := os.getenv("CHATREACTION_SEED")) is not None:
            values["random_seed"] = seed
        if (cancel := os.getenv("CHATREACTION_CANCEL_PENDING")) is not None:
            values["cancel_pending_on_stop"] = cancel.strip()
        if (level := os.getenv("CHATREACTION_LOG_LEVEL")) is not None:
            values["log_level"] = level

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
