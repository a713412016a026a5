"""Fixed historical conversation shown on first activation."""

from datetime import datetime, timedelta

from .models import Message, Reaction

# (content, is_from_user)
MOCK_CONVERSATION: tuple[tuple[str, bool], ...] = (
    ("Hello!", False),
    ("Hi there! How are you?", True),
    ("I'm doing great! Thanks for asking.", False),
    ("What can I help you with today?", False),
    ("I was wondering if you could help me with a project.", True),
    ("Of course! What kind of project are you working on?", False),
    ("I'm building a chat app with SwiftUI.", True),
    ("That sounds exciting! SwiftUI is great for building interactive UIs.", False),
    ("Yes, I'm particularly interested in adding reactions to messages.", True),
    ("That's a good feature! Similar to how iMessage and other chat apps work.", False),
    ("Exactly! I want users to be able to react with emojis.", True),
    ("Have you thought about how you'll implement that feature?", False),
    ("I'm thinking of using a context menu or maybe a custom gesture.", True),
    ("Both approaches could work well. Context menus are built into SwiftUI.", False),
)

# Position -> reactions pre-attached to the mock conversation
MOCK_REACTIONS: dict[int, tuple[str, ...]] = {
    1: (Reaction.LIKE.value,),
    3: (Reaction.LOVE.value,),
    8: (Reaction.LAUGH.value, Reaction.LIKE.value),
    11: (Reaction.WOW.value,),
}

FIRST_MESSAGE_AGE = timedelta(hours=1)
MESSAGE_SPACING = timedelta(seconds=50)


def mock_conversation(
    now: datetime | None = None,
    with_reactions: bool = True,
) -> list[Message]:
    """Build the seed conversation.

    Timestamps start one hour before ``now`` and step by 50 seconds.

    Args:
        now: Reference time (defaults to the current time)
        with_reactions: Pre-attach the sample reactions

    Returns:
        Fourteen messages in display order
    """
    now = now or datetime.now()
    start = now - FIRST_MESSAGE_AGE
    messages = []
    for position, (content, is_from_user) in enumerate(MOCK_CONVERSATION):
        reactions = MOCK_REACTIONS.get(position, ()) if with_reactions else ()
        messages.append(
            Message(
                content=content,
                is_from_user=is_from_user,
                timestamp=start + position * MESSAGE_SPACING,
                reactions=reactions,
            )
        )
    return messages
