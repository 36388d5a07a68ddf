"""Shared test fixtures for the Parley test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from parley.config.models.widget import WidgetConfig
from parley.conversation.engine import ConversationEngine
from parley.conversation.session import SessionStore
from parley.conversation.stores.inmemory import InMemoryStorage
from parley.generation.mock import MockReplyGenerator


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and loaded TOML before and after each test."""
    from parley.config import get_settings
    from parley.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults so no test inherits a captured stream."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def storage() -> InMemoryStorage:
    """A fresh tab-scoped medium."""
    return InMemoryStorage()


@pytest.fixture
def session(storage: InMemoryStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def generator() -> MockReplyGenerator:
    """Generator that holds each call until released."""
    return MockReplyGenerator(manual=True)


@pytest.fixture
def make_engine(
    generator: MockReplyGenerator,
) -> Callable[..., ConversationEngine]:
    """Factory building engines over a given medium.

    Building twice over the same medium simulates a reload in one tab.
    """

    def _make(
        medium: InMemoryStorage | None,
        reply_generator: MockReplyGenerator | None = None,
    ) -> ConversationEngine:
        return ConversationEngine(
            reply_generator or generator,
            SessionStore(medium, record_metrics=False),
            WidgetConfig(),
            record_metrics=False,
        )

    return _make


@pytest.fixture
def engine(
    make_engine: Callable[..., ConversationEngine],
    storage: InMemoryStorage,
) -> ConversationEngine:
    return make_engine(storage)
