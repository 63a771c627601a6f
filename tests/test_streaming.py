"""Coverage for the keep-alive event stream."""

from __future__ import annotations

import json

import pytest

from apprendo_mcp.streaming import KeepAliveTimer, event_stream, format_event


class _RecordingFactory:
    """Timer factory that remembers every timer it creates."""

    def __init__(self) -> None:
        self.timers: list[KeepAliveTimer] = []

    def __call__(self, interval: float) -> KeepAliveTimer:
        timer = KeepAliveTimer(interval)
        self.timers.append(timer)
        return timer


def _data(event: str) -> dict[str, object]:
    data_line = next(line for line in event.splitlines() if line.startswith("data: "))
    return json.loads(data_line[len("data: ") :])


def test_format_event_frames_sse() -> None:
    assert format_event("ping", {"a": 1}) == 'event: ping\ndata: {"a": 1}\n\n'


def test_timer_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        KeepAliveTimer(0)


@pytest.mark.anyio()
async def test_stream_sends_connected_then_pings_until_disconnect() -> None:
    """The first event signals connection; pings follow until the client leaves."""
    factory = _RecordingFactory()
    checks = iter([False, False, True])

    async def is_disconnected() -> bool:
        return next(checks)

    events = [
        event async for event in event_stream(is_disconnected, 0.01, factory)
    ]

    assert events[0].startswith("event: connected\n")
    assert _data(events[0])["status"] == "connected"
    assert [event.split("\n", 1)[0] for event in events[1:]] == [
        "event: ping",
        "event: ping",
    ]
    assert len(factory.timers) == 1
    assert factory.timers[0].cancelled is True


@pytest.mark.anyio()
async def test_closing_stream_releases_timer_once() -> None:
    """Closing the stream mid-flight cancels its timer exactly once."""
    factory = _RecordingFactory()

    async def is_disconnected() -> bool:
        return False

    stream = event_stream(is_disconnected, 0.01, factory)
    assert (await stream.__anext__()).startswith("event: connected")
    assert (await stream.__anext__()).startswith("event: ping")

    await stream.aclose()

    timer = factory.timers[0]
    assert timer.cancelled is True
    assert timer.cancel() is False


@pytest.mark.anyio()
async def test_concurrent_streams_own_separate_timers() -> None:
    """Disconnecting one client leaves other streams running."""
    factory = _RecordingFactory()

    async def is_disconnected() -> bool:
        return False

    first = event_stream(is_disconnected, 0.01, factory)
    second = event_stream(is_disconnected, 0.01, factory)
    for stream in (first, second):
        await stream.__anext__()
        await stream.__anext__()

    await first.aclose()

    assert [timer.cancelled for timer in factory.timers] == [True, False]
    assert (await second.__anext__()).startswith("event: ping")
    await second.aclose()
    assert factory.timers[1].cancelled is True


@pytest.mark.anyio()
async def test_cancelled_timer_cannot_restart() -> None:
    timer = KeepAliveTimer(0.01)

    assert timer.cancel() is True
    with pytest.raises(RuntimeError):
        timer.start()
