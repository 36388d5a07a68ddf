"""Conversation domain models.

Contains the pydantic models for widget conversation state:
- Messages making up the transcript
- The aggregate state owned by the engine
- The immutable view published to renderers
"""

from parley.conversation.models.enums import Origin, Screen
from parley.conversation.models.message import Message, Transcript
from parley.conversation.models.state import ConversationState, ConversationView

__all__ = [
    # Enums
    "Origin",
    "Screen",
    # Transcript
    "Message",
    "Transcript",
    # State
    "ConversationState",
    "ConversationView",
]
