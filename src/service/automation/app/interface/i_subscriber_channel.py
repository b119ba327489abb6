"""
Subscriber Channel Interface

The transport-facing side of one subscriber: where the hub pushes events
and where the SSE endpoint reads them back out.
"""

from collections.abc import AsyncGenerator
from typing import Protocol

from src.service.automation.domain.domain_event.luminaire_state_event import LuminaireStateEvent


class ISubscriberChannel(Protocol):
    def send(self, event: LuminaireStateEvent) -> bool:
        """
        Push one event without blocking

        Returns:
            True if the event was accepted, False if the channel is closed,
            broken or too far behind. The hub removes the subscriber on False.
        """
        ...

    def close(self) -> None:
        """Stop accepting events; readers drain what is buffered and then stop"""
        ...

    def events(self) -> AsyncGenerator[LuminaireStateEvent, None]:
        """Buffered events in send order; ends once close() was called and the buffer is drained"""
        ...
