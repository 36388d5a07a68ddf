"""Aggregate conversation state and the payload published to renderers."""

from collections import deque

from pydantic import BaseModel, ConfigDict, Field, computed_field

from parley.conversation.models.enums import Screen
from parley.conversation.models.message import Message


class ConversationState(BaseModel):
    """Mutable aggregate owned by the conversation engine.

    busy is true iff exactly one reply generation is in flight. While busy,
    submitted texts wait in pending_replies and are drained strictly FIFO.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    screen: Screen = Field(default=Screen.LANDING, description="Current screen")
    messages: list[Message] = Field(default_factory=list, description="Transcript")
    pending_replies: deque[str] = Field(
        default_factory=deque, description="Texts awaiting the responder"
    )
    busy: bool = Field(default=False, description="A generation is in flight")
    has_greeted: bool = Field(default=False, description="Greeting already requested")


class ConversationView(BaseModel):
    """Snapshot handed to renderers on every state change."""

    model_config = ConfigDict(frozen=True)

    screen: Screen
    messages: tuple[Message, ...]
    busy: bool
    pending: int = Field(default=0, description="Queued texts")
    typing_label: str | None = Field(
        default=None, description="Label to show while composing"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def composing(self) -> bool:
        """Whether a reply is currently being composed."""
        return self.busy
