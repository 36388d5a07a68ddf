"""Configuration section models."""

from parley.config.models.generation import GenerationConfig
from parley.config.models.observability import LoggingConfig, MetricsConfig, ObservabilityConfig
from parley.config.models.storage import StorageConfig
from parley.config.models.widget import WidgetConfig

__all__ = [
    "GenerationConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "StorageConfig",
    "WidgetConfig",
]
