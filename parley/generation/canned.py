"""Canned reply generator used by the demo widget."""

import asyncio
import random
from collections.abc import Awaitable, Callable, Sequence

from parley.generation.base import GenerationError, ReplyGenerator


class CannedReplyGenerator(ReplyGenerator):
    """Replies with a randomly picked canned text after a random delay.

    Stands in for a real assistant backend. A non-zero failure_rate makes
    it fail some requests so hosts can see the in-band error message.
    """

    def __init__(
        self,
        replies: Sequence[str],
        *,
        min_delay: float = 2.0,
        max_delay: float = 2.0,
        failure_rate: float = 0.0,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if not replies:
            raise ValueError("at least one canned reply is required")
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError("delays must satisfy 0 <= min_delay <= max_delay")
        self._replies = list(replies)
        self._min_delay = min_delay
        self._max_delay = max_delay
        self._failure_rate = failure_rate
        self._rng = rng or random.Random()
        self._sleep = sleep

    @property
    def name(self) -> str:
        return "canned"

    async def generate(self, prompt: str) -> str:
        await self._sleep(self._rng.uniform(self._min_delay, self._max_delay))
        if self._failure_rate and self._rng.random() < self._failure_rate:
            raise GenerationError(f"canned backend dropped prompt of {len(prompt)} chars")
        return self._rng.choice(self._replies)
