"""Session persistence configuration."""

from typing import Literal

from pydantic import BaseModel, Field

StorageBackend = Literal["inmemory", "none"]


class StorageConfig(BaseModel):
    """Configuration for the tab-scoped key/value medium."""

    backend: StorageBackend = Field(
        default="inmemory",
        description="Medium type; 'none' runs without persistence",
    )
    visitor_key: str = Field(
        default="user_id",
        min_length=1,
        description="Global key holding the visitor id",
    )
    messages_prefix: str = Field(default="chat_messages", description="Snapshot key prefix")
    greeted_prefix: str = Field(default="first_message_sent", description="Greeted flag prefix")
    name_prefix: str = Field(default="chat_name", description="Contact name key prefix")
    email_prefix: str = Field(default="chat_email", description="Contact email key prefix")
