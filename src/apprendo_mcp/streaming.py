"""Keep-alive event stream served on the ``/sse`` endpoint."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime, timezone
from types import TracebackType
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_KEEPALIVE_INTERVAL = 30.0


def format_event(event: str, data: dict[str, Any]) -> str:
    """Encode a single server-sent event."""
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class KeepAliveTimer:
    """Periodic ping source owned by exactly one stream connection.

    The timer runs as a background task that queues a ``ping`` event every
    ``interval`` seconds. :meth:`cancel` releases the task and is safe to call
    more than once; only the first call has an effect.
    """

    def __init__(self, interval: float = DEFAULT_KEEPALIVE_INTERVAL) -> None:
        """Create an idle timer; call :meth:`start` or use ``async with``."""
        if interval <= 0:
            raise ValueError("Keep-alive interval must be positive")
        self.interval = interval
        self.cancelled = False
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self._queue.put_nowait(format_event("ping", {"timestamp": _timestamp()}))

    def start(self) -> None:
        """Start ticking if not already running."""
        if self.cancelled:
            raise RuntimeError("Keep-alive timer has been cancelled")
        if self._task is None:
            self._task = asyncio.create_task(self._tick())

    async def next_event(self) -> str:
        """Wait for the next queued ping event."""
        return await self._queue.get()

    def cancel(self) -> bool:
        """Stop the timer.

        Returns:
            True if this call released the timer, False if it was already
            released.

        """
        if self.cancelled:
            return False
        self.cancelled = True
        if self._task is not None:
            self._task.cancel()
        return True

    async def __aenter__(self) -> KeepAliveTimer:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cancel()


async def event_stream(
    is_disconnected: Callable[[], Awaitable[bool]],
    interval: float = DEFAULT_KEEPALIVE_INTERVAL,
    timer_factory: Callable[[float], KeepAliveTimer] = KeepAliveTimer,
) -> AsyncIterator[str]:
    """Yield a ``connected`` event, then ``ping`` events until disconnect.

    Args:
        is_disconnected: Coroutine function reporting whether the client left.
        interval: Seconds between ping events.
        timer_factory: Builds the keep-alive timer for this connection.

    Yields:
        Encoded server-sent events.

    """
    yield format_event("connected", {"status": "connected", "timestamp": _timestamp()})
    logger.debug("Event stream opened")
    try:
        async with timer_factory(interval) as timer:
            while not await is_disconnected():
                yield await timer.next_event()
    finally:
        logger.debug("Event stream closed")
