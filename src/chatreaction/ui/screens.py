"""Modal screens for the TUI.

This module hides the design decisions about:
- Reaction picker appearance (CSS, layout)
- Keyboard shortcuts for choosing a reaction
- How the chosen reaction is handed back to the app

To change how the picker looks, modify only this file.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from ..conversation.models import Message, Reaction
from .config import REACTION_PREVIEW_LENGTH
from .formatting import format_content, truncate


class ReactionPickerScreen(ModalScreen[str | None]):
    """Context menu offering the four reactions for one message.

    Dismisses with the chosen emoji tag, or None when cancelled.
    Keys 1-4 pick a reaction in menu order.
    """

    CSS = """
    ReactionPickerScreen {
        align: center middle;
        background: $background 70%;
    }

    #reaction-dialog {
        width: 56;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #reaction-title {
        width: 100%;
        height: auto;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #reaction-preview {
        width: 100%;
        height: auto;
        padding: 0 1;
        background: $panel;
        border: round $border;
        color: $foreground;
        margin-bottom: 1;
    }

    #reaction-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #reaction-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("1", "choose(0)", "Love", show=False),
        Binding("2", "choose(1)", "Like", show=False),
        Binding("3", "choose(2)", "Laugh", show=False),
        Binding("4", "choose(3)", "Wow", show=False),
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, message: Message) -> None:
        super().__init__()
        self._message = message

    def compose(self) -> ComposeResult:
        preview = truncate(self._message.content, REACTION_PREVIEW_LENGTH)
        with Vertical(id="reaction-dialog"):
            yield Static("Add Reaction", id="reaction-title")
            yield Static(format_content(preview), id="reaction-preview")
            with Horizontal(id="reaction-buttons"):
                for reaction in Reaction:
                    yield Button(
                        f"{reaction.value} {reaction.label}",
                        id=f"react-{reaction.name.lower()}",
                        variant="primary",
                    )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Return the reaction behind the pressed button."""
        button_id = event.button.id or ""
        if button_id.startswith("react-"):
            self.dismiss(Reaction[button_id[6:].upper()].value)

    def action_choose(self, position: int) -> None:
        """Keyboard shortcut for the reaction at ``position`` in menu order."""
        self.dismiss(list(Reaction)[position].value)

    def action_cancel(self) -> None:
        self.dismiss(None)
