"""Wiring helpers that build a ready-to-use engine from settings."""

import structlog

from parley.config import Settings, get_settings
from parley.conversation.engine import ConversationEngine
from parley.conversation.session import SessionStore
from parley.conversation.store import StorageMedium
from parley.conversation.stores.inmemory import InMemoryStorage
from parley.generation import ReplyGenerator, create_generator
from parley.observability.logging import setup_logging
from parley.observability.metrics import setup_metrics


def setup_observability(settings: Settings) -> None:
    """Configure logging and metrics from the observability section.

    Debug mode forces DEBUG level console output. Every event carries the
    configured app name.
    """
    log_cfg = settings.observability.logging
    setup_logging(
        level="DEBUG" if settings.debug else log_cfg.level,
        format="console" if settings.debug else log_cfg.format,
        redact_pii=log_cfg.redact_pii,
    )
    structlog.contextvars.bind_contextvars(app=settings.app_name)
    if settings.observability.metrics.enabled:
        setup_metrics()


def create_medium(settings: Settings) -> StorageMedium | None:
    """Build the configured storage medium, or None for no persistence."""
    if settings.storage.backend == "none":
        return None
    return InMemoryStorage()


def create_engine(
    settings: Settings | None = None,
    *,
    medium: StorageMedium | None = None,
    generator: ReplyGenerator | None = None,
) -> ConversationEngine:
    """Create a conversation engine for one visitor.

    Pass the same medium again to rehydrate the session, the way a page
    reload within one browser tab would.

    Args:
        settings: Settings to use (defaults to get_settings())
        medium: Storage medium (defaults to the configured backend)
        generator: Reply generator (defaults to the configured backend)
    """
    settings = settings or get_settings()
    if medium is None:
        medium = create_medium(settings)
    session = SessionStore(
        medium,
        settings.storage,
        record_metrics=settings.observability.metrics.enabled,
    )
    return ConversationEngine(
        generator or create_generator(settings.generation),
        session,
        settings.widget,
        record_metrics=settings.observability.metrics.enabled,
    )
