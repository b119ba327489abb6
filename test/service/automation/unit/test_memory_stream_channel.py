"""
Unit tests for MemoryStreamChannel

The bounded buffer is what keeps one slow client from stalling a broadcast:
send() must never block and must report failure instead.
"""

from datetime import datetime, timezone

from anyio import fail_after
import pytest

from src.service.automation.domain.domain_event.luminaire_state_event import (
    HeartbeatEvent,
    StateChangeEvent,
)
from src.service.automation.driven_adapter.sse.memory_stream_channel import MemoryStreamChannel


def _state_change(luminaire_id: int, delivery_id: str = '1') -> StateChangeEvent:
    return StateChangeEvent(
        luminaire_id=luminaire_id,
        is_on=True,
        timestamp=datetime.now(timezone.utc),
        delivery_id=delivery_id,
    )


@pytest.mark.unit
class TestMemoryStreamChannel:
    @pytest.mark.asyncio
    async def test_events_come_out_in_send_order(self):
        channel = MemoryStreamChannel(max_buffer_size=10)
        for luminaire_id in range(3):
            assert channel.send(_state_change(luminaire_id)) is True
        channel.close()

        with fail_after(1.0):
            received = [event async for event in channel.events()]

        assert [e.luminaire_id for e in received] == [0, 1, 2]

    def test_full_buffer_fails_without_blocking(self):
        channel = MemoryStreamChannel(max_buffer_size=2)

        assert channel.send(_state_change(1)) is True
        assert channel.send(_state_change(2)) is True
        assert channel.send(_state_change(3)) is False

    def test_send_after_close_fails(self):
        channel = MemoryStreamChannel()
        channel.close()

        heartbeat = HeartbeatEvent(timestamp=datetime.now(timezone.utc), delivery_id='1')

        assert channel.send(heartbeat) is False

    @pytest.mark.asyncio
    async def test_send_after_reader_left_fails(self):
        channel = MemoryStreamChannel()
        channel.send(_state_change(1))

        events = channel.events()
        with fail_after(1.0):
            await anext(events)
        await events.aclose()

        assert channel.send(_state_change(2)) is False

    def test_close_is_idempotent(self):
        channel = MemoryStreamChannel()

        channel.close()
        channel.close()
