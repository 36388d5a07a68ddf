"""Transcript message model."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from parley.conversation.models.enums import Origin


class Message(BaseModel):
    """A single transcript entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    origin: Origin = Field(..., description="Who produced the message")
    text: str = Field(..., description="Message body")
    feedback: str | None = Field(default=None, description="Visitor feedback on the message")


# Serialized form of a transcript snapshot: a JSON array of messages
Transcript = TypeAdapter(list[Message])
