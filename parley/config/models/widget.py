"""Widget copy and canned prompt configuration."""

from pydantic import BaseModel, Field, model_validator

DEFAULT_HELP_OPTIONS = [
    "How much does a kitchen renovation cost in Montreal?",
    "What's included in your free consultation?",
    "How long does a bathroom renovation take?",
    "Do you handle permits and inspections?",
    "Can I see examples of your recent projects?",
]


class WidgetConfig(BaseModel):
    """Text the engine emits or forwards on behalf of the widget."""

    assistant_name: str = Field(default="Adam", description="Display name of the assistant")
    typing_label: str | None = Field(
        default=None,
        description="Composing label; derived from assistant_name when unset",
    )
    failure_message: str = Field(
        default="Oops! Something went wrong.",
        min_length=1,
        description="Assistant text appended when generation fails",
    )
    greeting_prompt: str = Field(
        default="Hello, I'd like to start a conversation.",
        min_length=1,
        description="Prompt for the synthetic introductory generation",
    )
    shortcut_prompt: str = Field(
        default="Send us a message",
        min_length=1,
        description="Prompt behind the landing screen's send-a-message card",
    )
    help_options: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HELP_OPTIONS),
        description="Help-menu quick replies",
    )

    @model_validator(mode="after")
    def fill_typing_label(self) -> "WidgetConfig":
        if self.typing_label is None:
            self.typing_label = f"{self.assistant_name} is typing..."
        return self
