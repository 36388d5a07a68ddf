"""Reply generator contract and error types.

A reply generator turns a prompt into assistant text, eventually. Any
implementation honoring ``generate`` works with the conversation engine:
the demo stub with randomized latency, a scripted test double, or a
network-backed assistant.
"""

from abc import ABC, abstractmethod


class GenerationError(Exception):
    """Base exception for reply generation failures."""

    pass


class ReplyGenerator(ABC):
    """Abstract interface for assistant reply generation."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the generator name."""
        pass

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Produce the reply text for prompt.

        Raises:
            GenerationError: If no reply could be produced
        """
        pass
