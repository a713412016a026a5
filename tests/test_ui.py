"""Tests for the Textual TUI, driven with the Textual pilot."""
import asyncio

import pytest

from chatreaction.config import ACKNOWLEDGEMENT, ChatSettings
from chatreaction.conversation import ManualScheduler
from chatreaction.conversation.seed import MOCK_CONVERSATION
from chatreaction.ui import (
    ChatHistoryWidget,
    ChatReactionApp,
    DebugPanel,
    LogLevel,
    ReactionPickerScreen,
    TextualScheduler,
)
from chatreaction.ui.formatting import format_header, format_reactions, truncate

SEED_SIZE = len(MOCK_CONVERSATION)


@pytest.fixture
def ui_scheduler():
    return ManualScheduler()


@pytest.fixture
def app(ui_scheduler, clock):
    """App on a virtual clock so timers only fire when the test advances them."""
    return ChatReactionApp(settings=ChatSettings(random_seed=11), scheduler=ui_scheduler, clock=clock)


def _chat(app: ChatReactionApp) -> ChatHistoryWidget:
    return app.query_one("#chat-history", ChatHistoryWidget)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_mount_seeds_and_renders(app):
    """Test that mounting activates the session and renders the seed."""
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.session.is_active
        assert _chat(app).message_count == SEED_SIZE
        assert _chat(app).bubble_at(8).reactions_text == "😂 👍"
        assert _chat(app).bubble_at(0).reactions_text == ""


@pytest.mark.asyncio
@pytest.mark.integration
async def test_send_message_and_echo(app, ui_scheduler):
    """Test typing a message, then receiving the acknowledgement."""
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press(*"hello")
        await pilot.press("enter")
        await pilot.pause()

        assert len(app.session.store) == SEED_SIZE + 1
        assert app.session.store.last.content == "hello"
        assert app.session.store.last.is_from_user
        assert app.session.input_text == ""

        ui_scheduler.advance(1.0)
        await pilot.pause()

        assert len(app.session.store) == SEED_SIZE + 2
        assert app.session.store.last.content == ACKNOWLEDGEMENT
        assert _chat(app).message_count == SEED_SIZE + 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_empty_submit_is_ignored(app):
    """Test that pressing enter on an empty input sends nothing."""
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        assert len(app.session.store) == SEED_SIZE


@pytest.mark.asyncio
@pytest.mark.integration
async def test_spaces_only_message_is_sent(app):
    """Test that a message of spaces is sent; only empty input is ignored."""
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("space", "space", "enter")
        await pilot.pause()
        assert len(app.session.store) == SEED_SIZE + 1
        assert app.session.store.last.content == "  "


@pytest.mark.asyncio
@pytest.mark.integration
async def test_periodic_messages_render(app, ui_scheduler):
    """Test that timer-driven messages appear in the list."""
    async with app.run_test() as pilot:
        await pilot.pause()
        ui_scheduler.advance(10.0)
        await pilot.pause()
        assert _chat(app).message_count == SEED_SIZE + 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_react_through_picker(app):
    """Test opening the picker on a bubble and choosing Like."""
    async with app.run_test() as pilot:
        await pilot.pause()
        _chat(app).bubble_at(0).action_request_reaction()
        await pilot.pause()
        assert isinstance(app.screen, ReactionPickerScreen)

        await pilot.press("2")
        await pilot.pause()

        assert not isinstance(app.screen, ReactionPickerScreen)
        assert app.session.store[0].reactions == ("👍",)
        assert _chat(app).bubble_at(0).reactions_text == "👍"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_picker_escape_cancels(app):
    """Test that escape closes the picker without reacting."""
    async with app.run_test() as pilot:
        await pilot.pause()
        _chat(app).bubble_at(2).action_request_reaction()
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()

        assert not isinstance(app.screen, ReactionPickerScreen)
        assert app.session.store[2].reactions == ()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_react_to_last_binding(app):
    """Test the react-to-newest shortcut appends to existing reactions."""
    async with app.run_test() as pilot:
        await pilot.pause()
        app.action_react_last()
        await pilot.pause()
        await pilot.press("4")
        await pilot.pause()

        assert app.session.store[SEED_SIZE - 1].reactions == ("😮",)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_teardown_stops_timers(app, ui_scheduler):
    """Test that leaving the app stops periodic messages and pending echoes."""
    async with app.run_test() as pilot:
        await pilot.pause()
        app.session.send_message("last words")
        await pilot.pause()

    assert not app.session.is_active
    size = len(app.session.store)
    ui_scheduler.advance(3600)
    assert len(app.session.store) == size


@pytest.mark.asyncio
@pytest.mark.integration
async def test_log_panel_from_settings(ui_scheduler, clock):
    """Test that a configured log level shows the panel and records activity."""
    app = ChatReactionApp(settings=ChatSettings(log_level="debug"), scheduler=ui_scheduler, clock=clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        panel = app.query_one("#debug-panel", DebugPanel)
        assert panel.display
        entries = panel.entries
        assert any("[Session]" in entry for entry in entries)
        assert any("[Responder]" in entry for entry in entries)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_toggle_log_panel(app):
    """Test that the log panel starts hidden and can be toggled."""
    async with app.run_test() as pilot:
        await pilot.pause()
        panel = app.query_one("#debug-panel", DebugPanel)
        assert not panel.display
        app.action_toggle_debug()
        await pilot.pause()
        assert panel.display


@pytest.mark.asyncio
@pytest.mark.integration
async def test_real_timer_echo_arrives():
    """Test the acknowledgement on Textual timers after the echo delay."""
    app = ChatReactionApp(settings=ChatSettings(echo_delay=0.05, message_interval=60))
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press(*"hi")
        await pilot.press("enter")
        await pilot.pause()
        assert app.session.store.last.content == "hi"

        await pilot.pause(0.3)

        contents = [m.content for m in app.session.store.messages[SEED_SIZE:]]
        assert contents == ["hi", ACKNOWLEDGEMENT]
        assert _chat(app).message_count == SEED_SIZE + 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_real_timers_stop_on_exit():
    """Test that no message is appended by Textual timers after the app exits."""
    app = ChatReactionApp(settings=ChatSettings(echo_delay=0.2, message_interval=0.05))
    async with app.run_test() as pilot:
        await pilot.pause(0.15)
        app.session.send_message("bye")
        await pilot.pause()

    assert not app.session.is_active
    assert app.session.responder.pending_echoes == 0
    size = len(app.session.store)
    await asyncio.sleep(0.4)
    assert len(app.session.store) == size


@pytest.mark.asyncio
@pytest.mark.integration
async def test_textual_scheduler_cancel():
    """Test that a cancelled Textual timer never fires."""
    app = ChatReactionApp(settings=ChatSettings(message_interval=60))
    async with app.run_test() as pilot:
        scheduler = TextualScheduler(app)
        fired = []
        dropped = scheduler.call_later(0.05, lambda: fired.append("dropped"))
        kept = scheduler.call_later(0.05, lambda: fired.append("kept"))
        dropped.cancel()
        await pilot.pause(0.3)

        assert fired == ["kept"]
        assert dropped.cancelled
        assert not kept.cancelled


class TestFormatting:
    """Tests for the formatting helpers."""

    def test_header(self, clock):
        """Test sender label and time."""
        from chatreaction.conversation import Message

        user = Message(content="x", is_from_user=True, timestamp=clock.now)
        bot = Message(content="x", is_from_user=False, timestamp=clock.now)
        assert format_header(user) == "You · 12:00"
        assert format_header(bot) == "Bot · 12:00"

    def test_reactions_keep_duplicates(self):
        """Test that duplicates are shown in order."""
        assert format_reactions(("👍", "❤️", "👍")) == "👍 ❤️ 👍"

    def test_truncate(self):
        """Test truncation with ellipsis."""
        assert truncate("short", 10) == "short"
        assert truncate("a" * 20, 10) == "aaaaaaa..."


class TestLogLevel:
    """Tests for log panel level parsing."""

    def test_from_string(self):
        """Test that callback level names map to thresholds."""
        assert LogLevel.from_string("warning") is LogLevel.WARNING
        assert LogLevel.from_string("ERROR") is LogLevel.ERROR
        assert LogLevel.from_string("verbose") is LogLevel.DEBUG

    def test_label(self):
        """Test display names, including unknown numbers."""
        assert LogLevel.label(20) == "INFO"
        assert LogLevel.label(25) == "UNKNOWN"
