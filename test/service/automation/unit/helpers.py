"""Test doubles shared by the automation unit tests."""

from collections.abc import AsyncGenerator
from typing import List

from src.service.automation.domain.domain_event.luminaire_state_event import LuminaireStateEvent


class FakeChannel:
    """
    In-memory ISubscriberChannel that records every send attempt.

    broken=True makes every send fail, like a client whose socket is gone.
    """

    def __init__(self, *, broken: bool = False) -> None:
        self.broken = broken
        self.closed = False
        self.send_attempts = 0
        self.received: List[LuminaireStateEvent] = []

    def send(self, event: LuminaireStateEvent) -> bool:
        self.send_attempts += 1
        if self.broken or self.closed:
            return False
        self.received.append(event)
        return True

    def close(self) -> None:
        self.closed = True

    async def events(self) -> AsyncGenerator[LuminaireStateEvent, None]:
        for event in list(self.received):
            yield event


class FakeChannelFactory:
    """Hands out FakeChannels in order; `broken_at` lists the indexes that fail"""

    def __init__(self, *, broken_at: tuple[int, ...] = ()) -> None:
        self.broken_at = broken_at
        self.channels: List[FakeChannel] = []

    def __call__(self) -> FakeChannel:
        channel = FakeChannel(broken=len(self.channels) in self.broken_at)
        self.channels.append(channel)
        return channel
