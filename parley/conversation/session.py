"""Tab-scoped session persistence namespaced by visitor id.

Persistence is best-effort: when the medium is missing or raises
StorageUnavailableError, reads return None and writes are dropped. The
engine never treats this store as the authoritative state of a running
session; it writes a snapshot after each transcript mutation and reads
it once at startup.
"""

import secrets
import string

from pydantic import ValidationError

from parley.config.models.storage import StorageConfig
from parley.conversation.models import Message, Transcript
from parley.conversation.store import StorageMedium, StorageUnavailableError
from parley.observability.logging import get_logger
from parley.observability.metrics import STORAGE_ERRORS

logger = get_logger(__name__)

VISITOR_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_visitor_id() -> str:
    """Return a fresh opaque visitor id such as ``user_k3f9a0zq``."""
    suffix = "".join(secrets.choice(VISITOR_ID_ALPHABET) for _ in range(8))
    return f"user_{suffix}"


class SessionStore:
    """Key/value persistence for one visitor in one tab."""

    def __init__(
        self,
        medium: StorageMedium | None,
        config: StorageConfig | None = None,
        *,
        record_metrics: bool = True,
    ) -> None:
        self._medium = medium
        self._config = config or StorageConfig()
        self._record_metrics = record_metrics
        self._visitor_id: str | None = None

    @property
    def visitor_id(self) -> str:
        """The visitor id, created and stored on first access."""
        if self._visitor_id is None:
            existing = self.get(self._config.visitor_key)
            if existing:
                self._visitor_id = existing
            else:
                self._visitor_id = generate_visitor_id()
                self.set(self._config.visitor_key, self._visitor_id)
                logger.info("visitor_created", visitor_id=self._visitor_id)
        return self._visitor_id

    def key(self, prefix: str) -> str:
        """Namespace prefix with the visitor id."""
        return f"{prefix}_{self.visitor_id}"

    def get(self, key: str) -> str | None:
        if self._medium is None:
            return None
        try:
            return self._medium.get(key)
        except StorageUnavailableError as exc:
            self._storage_failed("get", key, exc)
            return None

    def set(self, key: str, value: str) -> None:
        if self._medium is None:
            return
        try:
            self._medium.set(key, value)
        except StorageUnavailableError as exc:
            self._storage_failed("set", key, exc)

    def load_messages(self) -> list[Message]:
        """Rehydrate the transcript; unreadable snapshots count as absent."""
        raw = self.get(self.key(self._config.messages_prefix))
        if not raw:
            return []
        try:
            return Transcript.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "snapshot_unreadable",
                visitor_id=self.visitor_id,
                errors=exc.error_count(),
            )
            return []

    def save_messages(self, messages: list[Message]) -> None:
        payload = Transcript.dump_json(messages).decode("utf-8")
        self.set(self.key(self._config.messages_prefix), payload)

    def has_greeted(self) -> bool:
        return self.get(self.key(self._config.greeted_prefix)) == "true"

    def mark_greeted(self) -> None:
        self.set(self.key(self._config.greeted_prefix), "true")

    def contact(self) -> tuple[str, str] | None:
        """Stored (name, email) identity, or None unless both are present."""
        name = self.get(self.key(self._config.name_prefix))
        email = self.get(self.key(self._config.email_prefix))
        if name and email:
            return name, email
        return None

    def has_contact(self) -> bool:
        return self.contact() is not None

    def set_contact(self, name: str, email: str) -> None:
        self.set(self.key(self._config.name_prefix), name)
        self.set(self.key(self._config.email_prefix), email)

    def _storage_failed(self, operation: str, key: str, exc: StorageUnavailableError) -> None:
        if self._record_metrics:
            STORAGE_ERRORS.labels(operation=operation).inc()
        logger.warning("storage_unavailable", operation=operation, key=key, error=str(exc))
