"""Mock reply generator for testing."""

import asyncio
from collections.abc import Iterable

from parley.generation.base import GenerationError, ReplyGenerator


class MockReplyGenerator(ReplyGenerator):
    """Scriptable reply generator.

    Returns configurable replies without any latency. In manual mode every
    call blocks until the test calls release(), which lets a test hold a
    generation in flight while it submits more messages.
    """

    def __init__(
        self,
        reply_template: str = "Reply to: {prompt}",
        responses: dict[str, str] | None = None,
        failing: Iterable[str] = (),
        manual: bool = False,
    ):
        """Initialize mock generator.

        Args:
            reply_template: Format string used when no response matches
            responses: Dict mapping prompts to replies
            failing: Prompts that raise GenerationError
            manual: Hold every call until release() is called
        """
        self._reply_template = reply_template
        self._responses = responses or {}
        self._failing = set(failing)
        self._manual = manual
        self._permits = asyncio.Semaphore(0)
        self._call_history: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_history(self) -> list[str]:
        """Prompts received, in call order."""
        return self._call_history

    def set_response(self, prompt: str, reply: str) -> None:
        self._responses[prompt] = reply

    def fail_on(self, prompt: str) -> None:
        self._failing.add(prompt)

    def release(self, count: int = 1) -> None:
        """Let count held calls (current or future) settle."""
        for _ in range(count):
            self._permits.release()

    async def generate(self, prompt: str) -> str:
        self._call_history.append(prompt)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self._manual:
                await self._permits.acquire()
            else:
                await asyncio.sleep(0)
            if prompt in self._failing:
                raise GenerationError(f"scripted failure for {prompt!r}")
            return self._responses.get(prompt, self._reply_template.format(prompt=prompt))
        finally:
            self.in_flight -= 1
