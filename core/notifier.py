import asyncio
import itertools
import time
from dataclasses import dataclass
from typing import Callable, Optional
from utils.constants import ERROR, MESSAGE_DELAY_SECONDS, SUCCESS
from utils.logger import logger

_message_ids = itertools.count(1)


@dataclass(frozen=True)
class Message:
    """A visible status message. ``None`` in place of a Message means nothing is shown."""

    kind: str
    text: str
    expires_at: float
    id: int = 0

    @property
    def is_error(self) -> bool:
        return self.kind == ERROR


def show_message(
    state: Optional[Message], kind: str, text: str, now: float, delay: float = MESSAGE_DELAY_SECONDS
) -> Message:
    """Any new outcome replaces whatever is showing; its delay starts from ``now``."""
    if kind not in (SUCCESS, ERROR):
        raise ValueError(f"Unknown message kind: {kind!r}")
    return Message(kind=kind, text=text, expires_at=now + delay, id=next(_message_ids))


def expire_message(state: Optional[Message], now: float) -> Optional[Message]:
    if state is not None and now >= state.expires_at:
        return None
    return state


class TransientNotifier:
    """
    Holds at most one status message and clears it after ``delay`` seconds.

    ``notify`` returns a future that resolves once the message is gone, either
    because its delay ran out or because a newer message replaced it. Callers
    that want "show the message, then refresh" await it; others ignore it.

    Renderers that cannot keep a loop running between redraws (streamlit
    reruns) call ``expire`` before drawing instead.
    """

    def __init__(
        self,
        delay: float = MESSAGE_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        on_change: Optional[Callable[[Optional[Message]], None]] = None,
    ):
        self.delay = delay
        self.clock = clock
        self.on_change = on_change
        self.current: Optional[Message] = None
        self._clear_task: Optional[asyncio.Task] = None
        self._ack: Optional["asyncio.Future[None]"] = None

    def notify(self, kind: str, text: str) -> "asyncio.Future[None]":
        loop = asyncio.get_running_loop()

        # latest wins: drop the pending clear of the previous message
        self._release()

        self._set(show_message(self.current, kind, text, self.clock(), self.delay))
        logger.info("%s message: %s", kind, text)

        ack = loop.create_future()
        task = loop.create_task(self._clear_after(self.current))
        # also covers a task cancelled before its first step
        task.add_done_callback(lambda _task: _resolve(ack))
        self._clear_task, self._ack = task, ack
        return ack

    def success(self, text: str) -> "asyncio.Future[None]":
        return self.notify(SUCCESS, text)

    def error(self, text: str) -> "asyncio.Future[None]":
        return self.notify(ERROR, text)

    def expire(self, now: Optional[float] = None) -> Optional[Message]:
        now = self.clock() if now is None else now
        state = expire_message(self.current, now)
        if state is not self.current:
            self._set(state)
        return self.current

    def remaining(self, now: Optional[float] = None) -> float:
        """Seconds until the current message clears (0 when idle)."""
        if self.current is None:
            return 0.0
        now = self.clock() if now is None else now
        return max(self.current.expires_at - now, 0.0)

    def clear(self):
        self._release()
        self._set(None)

    def _release(self):
        """Cancel the pending clear and resolve its acknowledgment right away."""
        task, ack = self._clear_task, self._ack
        self._clear_task = self._ack = None
        if task is not None and not task.done():
            task.cancel()
        if ack is not None:
            _resolve(ack)

    async def _clear_after(self, message: Message):
        await asyncio.sleep(self.delay)
        if self.current is message:
            self._set(None)

    def _set(self, state: Optional[Message]):
        self.current = state
        if self.on_change is not None:
            self.on_change(state)


def _resolve(ack: "asyncio.Future[None]"):
    # a future left over from a finished streamlit rerun belongs to a closed loop
    if not ack.done() and not ack.get_loop().is_closed():
        ack.set_result(None)
