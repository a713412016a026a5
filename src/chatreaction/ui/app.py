"""Main Textual TUI application.

Orchestrates the UI components and wires them to a ChatSession.
"""

import asyncio
from collections.abc import Callable
from datetime import datetime

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..config import ChatSettings
from ..conversation import (
    ChatSession,
    InvalidMessageIndexError,
    MessageAppended,
    ReactionAttached,
    Scheduler,
    StoreEvent,
)
from .config import LogLevel
from .scheduler import TextualScheduler
from .screens import ReactionPickerScreen
from .styles import APP_CSS
from .themes import MESSENGER_NIGHT
from .widgets import ChatBubble, ChatHistoryWidget, ChatInputBar, DebugPanel


class ChatReactionApp(App):
    """Textual TUI for the mock chat."""

    CSS = APP_CSS
    TITLE = "ChatReaction"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("ctrl+e", "react_last", "React to Last"),
    ]

    def __init__(
        self,
        settings: ChatSettings | None = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__()
        self._settings = settings or ChatSettings()
        self.session = ChatSession(
            scheduler or TextualScheduler(self),
            self._settings,
            clock=clock,
        )
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted: render the session and start it."""
        self.register_theme(MESSENGER_NIGHT)
        self.theme = "messenger-night"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._settings.log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._settings.log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._settings.log_level.upper()}")
        self.session.set_debug_callback(log_panel.callback)

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        # Messages already in the store (e.g. a reused session) are rendered first
        for index, message in enumerate(self.session.store):
            chat.add_message(index, message)
        self._unsubscribe = self.session.store.subscribe(self._on_store_event)

        self.session.activate()
        self.sub_title = (
            f"reply {self._settings.echo_delay:g}s | "
            f"random message every {self._settings.message_interval:g}s"
        )
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Stop timers and detach from the store."""
        self.session.deactivate()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_store_event(self, event: StoreEvent) -> None:
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        if isinstance(event, MessageAppended):
            chat.add_message(event.index, event.message)
        elif isinstance(event, ReactionAttached):
            chat.update_message(event.index, event.message)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self.session.input_text = event.value
        self.session.send_message()

    def on_chat_bubble_reaction_requested(self, event: ChatBubble.ReactionRequested) -> None:
        """Open the reaction picker for the requested message."""
        self._open_reaction_picker(event.index)

    def _open_reaction_picker(self, index: int) -> None:
        log_panel = self.query_one("#debug-panel", DebugPanel)
        try:
            message = self.session.store[index]
        except InvalidMessageIndexError as e:
            log_panel.error("TUI", str(e))
            self.notify(str(e), severity="error", timeout=3)
            return

        def _apply(tag: str | None) -> None:
            if tag is None:
                return
            try:
                self.session.react(index, tag)
            except InvalidMessageIndexError as e:
                log_panel.error("TUI", str(e))
                self.notify(str(e), severity="error", timeout=3)

        self.push_screen(ReactionPickerScreen(message), _apply)

    def action_react_last(self) -> None:
        """Open the reaction picker for the newest message."""
        self._open_reaction_picker(len(self.session.store) - 1)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_chat_tui(settings: ChatSettings | None = None) -> None:
    """Run the Textual TUI.

    Args:
        settings: Session settings (defaults are used when omitted)
    """
    app = ChatReactionApp(settings=settings)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
