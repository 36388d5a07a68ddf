"""Enums for conversation domain."""

from enum import StrEnum


class Origin(StrEnum):
    """Author of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class Screen(StrEnum):
    """Widget screen selector."""

    LANDING = "landing"
    ACTIVE = "active"
