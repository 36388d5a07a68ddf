"""Conversation engine: the widget's session and reply-queue state machine.

The engine is the only component that mutates ConversationState. Intents
are plain methods that run to completion synchronously; the one
asynchronous boundary is the reply generator, which runs as a task on the
current event loop. While that task is in flight the engine keeps
accepting intents and queues submitted texts, so at most one generation is
ever outstanding and replies come back in submission order.

Intents that may start a generation must be called from inside a running
event loop.
"""

import asyncio
from collections.abc import Callable
from time import monotonic

from parley.config.models.widget import WidgetConfig
from parley.conversation.models import (
    ConversationState,
    ConversationView,
    Message,
    Origin,
    Screen,
)
from parley.conversation.session import SessionStore
from parley.generation.base import ReplyGenerator
from parley.observability.logging import get_logger
from parley.observability.metrics import (
    GENERATION_LATENCY,
    GENERATIONS,
    MESSAGES_APPENDED,
    PENDING_REPLIES,
)

logger = get_logger(__name__)

Listener = Callable[[ConversationView], None]


class ConversationEngine:
    """Owns one visitor's transcript, reply queue, busy flag and screen."""

    def __init__(
        self,
        generator: ReplyGenerator,
        session: SessionStore,
        widget: WidgetConfig | None = None,
        *,
        record_metrics: bool = True,
    ) -> None:
        self._generator = generator
        self._session = session
        self._widget = widget or WidgetConfig()
        self._record_metrics = record_metrics
        self._listeners: list[Listener] = []
        self._task: asyncio.Task[None] | None = None
        self._started_at = 0.0
        self._idle = asyncio.Event()
        self._idle.set()
        self._log = logger.bind(visitor_id=session.visitor_id)

        self._state = ConversationState(
            screen=Screen.ACTIVE if session.has_contact() else Screen.LANDING,
            messages=session.load_messages(),
            has_greeted=session.has_greeted(),
        )
        self._log.debug(
            "engine_started",
            screen=self._state.screen.value,
            restored_messages=len(self._state.messages),
        )

    # -- observation -------------------------------------------------------

    @property
    def view(self) -> ConversationView:
        """Immutable snapshot of what a renderer needs."""
        return ConversationView(
            screen=self._state.screen,
            messages=tuple(self._state.messages),
            busy=self._state.busy,
            pending=len(self._state.pending_replies),
            typing_label=self._widget.typing_label if self._state.busy else None,
        )

    @property
    def state(self) -> ConversationState:
        """Deep copy of the current aggregate state."""
        return self._state.model_copy(deep=True)

    @property
    def quick_replies(self) -> list[str]:
        """Landing-screen prompts: the send-a-message shortcut, then help options."""
        return [self._widget.shortcut_prompt, *self._widget.help_options]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener and return a callable that removes it.

        The listener is called with the current view right away and again
        after every state change.
        """
        self._listeners.append(listener)
        self._notify(listener, self.view)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def wait_idle(self) -> None:
        """Wait until no generation is in flight and the queue is empty."""
        await self._idle.wait()

    # -- intents -----------------------------------------------------------

    def submit_user_message(self, text: str) -> None:
        """Append a user message and start or queue its reply."""
        if self._submit(text):
            self._publish()

    def select_quick_reply(self, prompt: str) -> None:
        """Open the active screen and submit a canned prompt as user text."""
        self._state.screen = Screen.ACTIVE
        self._submit(prompt)
        self._publish()

    def open_direct_channel(self) -> None:
        """Open the active screen, greeting first-time visitors once."""
        self._state.screen = Screen.ACTIVE
        if not self._state.has_greeted:
            if not self._session.has_contact():
                self._log.info("greeting_requested")
                self._request_reply(self._widget.greeting_prompt)
            self._state.has_greeted = True
            self._session.mark_greeted()
        self._publish()

    def switch_screen(self, target: Screen | str) -> None:
        """Change screen without touching the transcript or the queue."""
        self._state.screen = Screen(target)
        self._publish()

    def record_contact(self, name: str, email: str) -> None:
        """Remember the visitor's contact identity for this tab."""
        self._session.set_contact(name.strip(), email.strip())
        self._log.info("contact_recorded", email=email)

    # -- responder protocol ------------------------------------------------

    def _submit(self, text: str) -> bool:
        message = text.strip()
        if not message:
            return False
        self._append(Message(origin=Origin.USER, text=message))
        self._request_reply(message)
        return True

    def _request_reply(self, prompt: str) -> None:
        if self._state.busy:
            self._state.pending_replies.append(prompt)
            self._track_queue()
            self._log.debug("reply_queued", pending=len(self._state.pending_replies))
        else:
            self._start_generation(prompt)

    def _start_generation(self, prompt: str) -> None:
        # Raises RuntimeError outside a loop; state is untouched until the task exists
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._generate(prompt))
        self._state.busy = True
        self._idle.clear()
        self._started_at = monotonic()
        self._log.debug("generation_started", generator=self._generator.name)

    async def _generate(self, prompt: str) -> None:
        try:
            reply = await self._generator.generate(prompt)
        except (Exception, asyncio.CancelledError) as exc:
            self._log.warning(
                "generation_failed",
                generator=self._generator.name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            self._complete_generation(exc)
        else:
            self._complete_generation(reply)

    def _complete_generation(self, result: str | BaseException) -> None:
        failed = isinstance(result, BaseException)
        if self._record_metrics:
            GENERATIONS.labels(outcome="failure" if failed else "success").inc()
            GENERATION_LATENCY.observe(monotonic() - self._started_at)

        text = self._widget.failure_message if failed else str(result)
        self._append(Message(origin=Origin.ASSISTANT, text=text))
        self._state.busy = False
        self._task = None

        if self._state.pending_replies:
            self._start_generation(self._state.pending_replies.popleft())
            self._track_queue()
        else:
            self._idle.set()
            self._log.debug("responder_idle")
        self._publish()

    # -- helpers -----------------------------------------------------------

    def _append(self, message: Message) -> None:
        self._state.messages.append(message)
        self._session.save_messages(self._state.messages)
        if self._record_metrics:
            MESSAGES_APPENDED.labels(origin=message.origin.value).inc()

    def _track_queue(self) -> None:
        if self._record_metrics:
            PENDING_REPLIES.set(len(self._state.pending_replies))

    def _publish(self) -> None:
        view = self.view
        for listener in list(self._listeners):
            self._notify(listener, view)

    def _notify(self, listener: Listener, view: ConversationView) -> None:
        try:
            listener(view)
        except Exception:
            self._log.exception("listener_failed")
