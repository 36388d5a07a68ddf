"""Reply generators.

The conversation engine only depends on the ReplyGenerator contract.
create_generator() builds the configured implementation:
- canned -> CannedReplyGenerator (demo stub with simulated latency)
- mock -> MockReplyGenerator (instant scripted replies)
"""

from parley.config.models.generation import GenerationConfig
from parley.generation.base import GenerationError, ReplyGenerator
from parley.generation.canned import CannedReplyGenerator
from parley.generation.mock import MockReplyGenerator


def create_generator(config: GenerationConfig) -> ReplyGenerator:
    """Build the reply generator selected by config."""
    if config.backend == "mock":
        return MockReplyGenerator()
    return CannedReplyGenerator(
        config.canned_replies,
        min_delay=config.min_delay_seconds,
        max_delay=config.max_delay_seconds,
        failure_rate=config.failure_rate,
    )


__all__ = [
    "GenerationError",
    "ReplyGenerator",
    "CannedReplyGenerator",
    "MockReplyGenerator",
    "create_generator",
]
