"""Terminal UI module for chatreaction.

Provides a Textual-based TUI for the mock chat.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (bubbles, message list, input bar, log panel)
- screens.py: Modal dialogs (reaction picker)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- formatting.py: How messages and reactions become text
- scheduler.py: Timers on the Textual event loop
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatReactionApp, run_chat_tui
from .config import LogLevel
from .scheduler import TextualScheduler
from .screens import ReactionPickerScreen
from .widgets import ChatBubble, ChatHistoryWidget, ChatInputBar, DebugPanel

__all__ = [
    "ChatBubble",
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatReactionApp",
    "DebugPanel",
    "LogLevel",
    "ReactionPickerScreen",
    "TextualScheduler",
    "run_chat_tui",
]
