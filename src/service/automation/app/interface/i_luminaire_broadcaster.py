"""
Luminaire Broadcaster Interface

Fans luminaire state changes out to every connected real-time client.

Follows Dependency Inversion Principle:
- Use cases depend on this interface
- The in-memory SSE hub implements it
"""

from typing import TYPE_CHECKING, Protocol


if TYPE_CHECKING:
    from src.service.automation.driven_adapter.sse.subscriber_handle import SubscriberHandle


class ILuminaireBroadcaster(Protocol):
    async def subscribe(self) -> 'SubscriberHandle':
        """
        Register a new subscriber and send it the initial_state snapshot

        Note:
            If the initial send fails the subscriber is removed straight away;
            the returned handle is then already REMOVED. No error is raised.
        """
        ...

    async def publish(self, *, luminaire_id: int, is_on: bool) -> None:
        """
        Send a state_change event to every active subscriber

        Note:
            Failed deliveries remove that subscriber only; never raises
        """
        ...

    async def heartbeat(self) -> None:
        """Send a heartbeat to every active subscriber; no-op when there are none"""
        ...

    def active_count(self) -> int: ...
