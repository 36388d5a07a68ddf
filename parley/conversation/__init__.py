"""Conversation state machine, models and session persistence."""

from parley.conversation.engine import ConversationEngine, Listener
from parley.conversation.session import SessionStore, generate_visitor_id

__all__ = [
    "ConversationEngine",
    "Listener",
    "SessionStore",
    "generate_visitor_id",
]
