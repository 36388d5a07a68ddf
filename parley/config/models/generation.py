"""Reply generator configuration."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

GeneratorBackend = Literal["canned", "mock"]

DEFAULT_CANNED_REPLIES = [
    "Thank you for your message! This is a demo response. Our team will get "
    "back to you shortly with more information about our renovation services.",
]


class GenerationConfig(BaseModel):
    """Configuration for the reply generator."""

    backend: GeneratorBackend = Field(default="canned", description="Generator type")
    min_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Lower bound of simulated latency",
    )
    max_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Upper bound of simulated latency",
    )
    canned_replies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CANNED_REPLIES),
        min_length=1,
        description="Replies the canned generator picks from",
    )
    failure_rate: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Probability that the canned generator fails a request",
    )

    @model_validator(mode="after")
    def check_delay_bounds(self) -> "GenerationConfig":
        if self.max_delay_seconds < self.min_delay_seconds:
            raise ValueError("max_delay_seconds must be >= min_delay_seconds")
        return self
