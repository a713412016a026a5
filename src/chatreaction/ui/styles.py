"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: a single column with the message list on top, an optional
log panel, and the input bar docked at the bottom.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Single Column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History - Scrolling Message List
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Chat Messages - One Row per Message
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    background: transparent;
}

.bubble {
    width: auto;
    max-width: 70%;
    height: auto;
    padding: 0 2;
}

/* Outgoing messages - right aligned, blue */
.user-message {
    align-horizontal: right;

    & .bubble {
        background: $primary;
        color: $background;
    }

    & .message-header {
        color: $background 70%;
        text-align: right;
    }

    & .message-reactions {
        text-align: right;
    }
}

/* Incoming messages - left aligned, graphite */
.bot-message {
    align-horizontal: left;

    & .bubble {
        background: $secondary;
        color: $foreground;
    }

    & .message-header {
        color: $text-muted;
    }
}

/* Focused message - highlighted for keyboard reactions */
.chat-message:focus .bubble {
    border-left: tall $accent;
}

.message-header {
    width: auto;
    height: auto;
    text-style: italic;
}

.message-content {
    width: auto;
    height: auto;
}

.message-reactions {
    width: 100%;
    height: auto;
    color: $accent;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    padding: 1 0 0 0;
    background: $panel;
    border-top: solid $border;
}

#chat-input {
    width: 1fr;
    border: round $primary 60%;
    background: $surface;

    &:focus {
        border: round $primary;
    }
}

#send-btn {
    width: 10;
    min-width: 8;
    margin: 0 1;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
        color: $foreground;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
        color: $foreground;
    }
}

/* ============================================
   Scrollbar Styling
   ============================================ */
* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

Footer {
    background: $panel;
    height: auto;
}
"""
