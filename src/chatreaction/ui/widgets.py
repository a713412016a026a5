"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat bubble rendering and alignment
- Reaction row display
- Input history management
- Log rendering and scrolling
"""

from datetime import datetime

from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, RichLog, Static

from ..conversation.models import Message
from .config import INPUT_PLACEHOLDER, LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import format_content, format_header, format_reactions, truncate


class ChatBubble(Horizontal):
    """One message row: a bubble aligned by sender with reactions underneath.

    Clicking the bubble, or pressing ``r`` while it has focus, asks the app
    to open the reaction picker for this message.
    """

    can_focus = True

    BINDINGS = [
        Binding("r", "request_reaction", "React"),
    ]

    class ReactionRequested(TextualMessage):
        """Posted when the user wants to react to this message."""

        def __init__(self, index: int, message: Message) -> None:
            super().__init__()
            self.index = index
            self.message = message

    def __init__(self, index: int, message: Message, *args, **kwargs) -> None:
        row_class = "user-message" if message.is_from_user else "bot-message"
        super().__init__(*args, classes=f"chat-message {row_class}", **kwargs)
        self.index = index
        self._message = message
        self._header = Static(format_header(message), classes="message-header")
        self._content = Static(format_content(message.content), classes="message-content")
        self._reactions = Static(format_reactions(message.reactions), classes="message-reactions")
        self._reactions.display = bool(message.reactions)

    @property
    def message(self) -> Message:
        return self._message

    @property
    def reactions_text(self) -> str:
        """Reaction row as displayed."""
        return format_reactions(self._message.reactions)

    def compose(self):
        with Vertical(classes="bubble"):
            yield self._header
            yield self._content
            yield self._reactions

    def update_message(self, message: Message) -> None:
        """Show a newer version of the same message (e.g. with a new reaction)."""
        self._message = message
        self._reactions.update(format_reactions(message.reactions))
        self._reactions.display = bool(message.reactions)

    def on_click(self, event: Click) -> None:
        event.stop()
        self.focus()
        self.action_request_reaction()

    def action_request_reaction(self) -> None:
        self.post_message(self.ReactionRequested(self.index, self._message))


class ChatHistoryWidget(VerticalScroll):
    """Scrollable message list that follows the newest message."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._bubbles: list[ChatBubble] = []

    @property
    def message_count(self) -> int:
        return len(self._bubbles)

    def bubble_at(self, index: int) -> ChatBubble:
        """Bubble for the message at ``index``."""
        return self._bubbles[index]

    def add_message(self, index: int, message: Message) -> ChatBubble:
        """Render a new message and scroll to it."""
        bubble = ChatBubble(index, message)
        self._bubbles.append(bubble)
        self.mount(bubble)
        self.border_subtitle = f"{len(self._bubbles)} messages"
        self.scroll_end(animate=False)
        return bubble

    def update_message(self, index: int, message: Message) -> None:
        """Refresh the bubble at ``index`` after its reactions changed."""
        self._bubbles[index].update_message(message)


class HistoryInput(Input):
    """Input widget with sent-message history.

    Use Up/Down arrow keys to navigate through history.
    Multi-line pastes are converted to single line (newlines become spaces).
    """

    BINDINGS = [
        Binding("up", "history_prev", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    def _on_paste(self, event) -> None:
        """Handle paste events - convert newlines to spaces for single-line input."""
        from textual.events import Paste

        if isinstance(event, Paste) and event.text:
            clean_text = " ".join(event.text.split())
            self.insert_text_at_cursor(clean_text)
            event.prevent_default()
            event.stop()

    def action_history_prev(self) -> None:
        """Show the previous sent message."""
        if not self._history:
            return
        if self._history_index == -1:
            self._current_input = self.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.value = self._history[self._history_index]
        self.cursor_position = len(self.value)

    def action_history_next(self) -> None:
        """Show the next sent message, or the draft after the newest one."""
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.value = self._current_input
        self.cursor_position = len(self.value)

    def add_to_history(self, text: str) -> None:
        """Remember a sent message."""
        if text and (not self._history or self._history[-1] != text):
            self._history.append(text)
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Text entry with a Send button. Enter also sends."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="primary").with_tooltip("Send message (Enter)")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", HistoryInput)
        value = text_input.value
        if not value:
            return
        text_input.add_to_history(value)
        text_input.value = ""
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self._entries: list[str] = []

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    @property
    def entries(self) -> list[str]:
        """Plain-text entries written so far."""
        return list(self._entries)

    def _update_subtitle(self) -> None:
        """Update subtitle to show current log level."""
        if self.display:
            level_name = LogLevel.label(self._log_level)
            self.border_subtitle = f"Level: {level_name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Store, Responder, Session)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        message = truncate(message, LOG_MAX_MESSAGE_LENGTH)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")
        level_name = LogLevel.label(level)

        component_colors = {
            "TUI": "cyan",
            "Store": "green",
            "Responder": "magenta",
            "Session": "bright_blue",
        }
        comp_color = component_colors.get(component, "white")

        self._entries.append(f"{timestamp} {level_name:<5} [{component}] {message}")

        from rich.markup import escape
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.add_entry(component, message, LogLevel.ERROR)

    def callback(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point for the conversation core."""
        self.add_entry(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        else:
            self.show()
            return True
