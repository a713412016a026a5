"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Dark/light mode configuration

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Dark messenger palette: blue outgoing bubbles, graphite incoming ones
MESSENGER_NIGHT = Theme(
    name="messenger-night",
    primary="#0a84ff",      # Outgoing bubble blue
    secondary="#3a3a3c",    # Incoming bubble graphite
    accent="#ffd60a",       # Reaction highlight
    foreground="#f2f2f7",
    background="#000000",
    success="#30d158",
    warning="#ff9f0a",
    error="#ff453a",
    surface="#1c1c1e",
    panel="#121214",
    dark=True,
    variables={
        # Input styling
        "input-cursor-background": "#f2f2f7",
        "input-cursor-foreground": "#000000",
        "input-selection-background": "#0a84ff 30%",

        # Border colors
        "border": "#3a3a3c",
        "border-blurred": "#2c2c2e",

        # Scrollbar styling
        "scrollbar": "#2c2c2e",
        "scrollbar-hover": "#3a3a3c",
        "scrollbar-active": "#0a84ff",
        "scrollbar-background": "#121214",
        "scrollbar-corner-color": "#121214",

        # Footer styling
        "footer-foreground": "#d1d1d6",
        "footer-background": "#000000",
        "footer-key-foreground": "#ffd60a",
        "footer-key-background": "#2c2c2e",
        "footer-description-foreground": "#aeaeb2",

        # Text variants
        "text-muted": "#8e8e93",
        "text-disabled": "#48484a",
    },
)
