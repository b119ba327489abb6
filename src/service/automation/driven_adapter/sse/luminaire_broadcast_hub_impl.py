"""
Luminaire Broadcast Hub Implementation

In-memory fan-out of luminaire state events to SSE subscribers.

Architecture:
- HTTP controller → use case → state store → publish() → every subscriber channel
- SSE endpoint → subscribe() → initial_state snapshot → incremental events
- Heartbeat task → heartbeat() every SSE_HEARTBEAT_INTERVAL_SECONDS

Subscriber set:
- Copy-on-write tuple: broadcast iterates a stable snapshot taken at call
  time, registration and removal swap in a new tuple
- All mutation happens on the event loop thread and never awaits in the
  middle of an update, so no lock is needed around the swap

Failure policy:
- A failed delivery (closed, broken or full channel) removes that subscriber
  only; it is never retried and never surfaces to the caller
- Removal is idempotent, whatever triggered it
"""

from datetime import datetime, timezone
import itertools
import time
from typing import Callable, Tuple

import anyio
from anyio.abc import TaskGroup

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.automation_metrics import metrics
from src.service.automation.app.interface.i_luminaire_broadcaster import ILuminaireBroadcaster
from src.service.automation.app.interface.i_luminaire_state_store import ILuminaireStateStore
from src.service.automation.app.interface.i_subscriber_channel import ISubscriberChannel
from src.service.automation.domain.domain_event.luminaire_state_event import (
    HeartbeatEvent,
    InitialStateEvent,
    LuminaireStateEvent,
    StateChangeEvent,
)
from src.service.automation.domain.entity.subscriber_entity import SubscriberEntity
from src.service.automation.domain.enum.subscriber_status import SubscriberRemovalReason
from src.service.automation.driven_adapter.sse.memory_stream_channel import MemoryStreamChannel
from src.service.automation.driven_adapter.sse.subscriber_handle import SubscriberHandle


ChannelFactory = Callable[[], ISubscriberChannel]


class LuminaireBroadcastHubImpl(ILuminaireBroadcaster):
    def __init__(
        self,
        *,
        state_store: ILuminaireStateStore,
        heartbeat_interval: float = 30.0,
        buffer_size: int = 100,
        channel_factory: ChannelFactory | None = None,
    ) -> None:
        self.state_store = state_store
        self._heartbeat_interval = heartbeat_interval
        self._channel_factory: ChannelFactory = channel_factory or (
            lambda: MemoryStreamChannel(max_buffer_size=buffer_size)
        )
        self._subscribers: Tuple[SubscriberHandle, ...] = ()
        self._subscriber_ids = itertools.count(1)
        self._last_delivery_id = 0

    # ============================ Subscription ============================

    async def subscribe(self) -> SubscriberHandle:
        handle = SubscriberHandle(
            subscriber=SubscriberEntity(id=next(self._subscriber_ids)),
            channel=self._channel_factory(),
        )
        handle.on_completion(lambda: self._remove(handle, reason=SubscriberRemovalReason.COMPLETION))
        handle.on_timeout(lambda: self._remove(handle, reason=SubscriberRemovalReason.TIMEOUT))
        handle.on_error(lambda _error: self._remove(handle, reason=SubscriberRemovalReason.ERROR))

        self._subscribers = (*self._subscribers, handle)

        initial_event = InitialStateEvent(
            all_states=self.state_store.snapshot(),
            timestamp=datetime.now(timezone.utc),
            delivery_id=self._next_delivery_id(),
        )
        if not handle.deliver(initial_event):
            Logger.base.error(
                f'❌ [SSE] Initial state could not be sent to subscriber {handle.subscriber_id}'
            )
            self._remove(handle, reason=SubscriberRemovalReason.DELIVERY_FAILED)
            return handle

        handle.subscriber.activate()
        metrics.set_active_subscribers(active=self.active_count())
        metrics.record_delivery(event_type=initial_event.event_type.value, delivered=1)
        Logger.base.info(
            f'📡 [SSE] Subscriber {handle.subscriber_id} connected, initial state sent '
            f'(total subscribers: {self.active_count()})'
        )
        return handle

    # ============================ Broadcast ============================

    async def publish(self, *, luminaire_id: int, is_on: bool) -> None:
        subscribers = self._subscribers
        Logger.base.info(
            f'🔥 [SSE] Broadcasting luminaire {luminaire_id} is {"on" if is_on else "off"} '
            f'to {len(subscribers)} subscribers'
        )

        event = StateChangeEvent(
            luminaire_id=luminaire_id,
            is_on=is_on,
            timestamp=datetime.now(timezone.utc),
            delivery_id=self._next_delivery_id(),
        )
        delivered, removed = self._fan_out(event=event, subscribers=subscribers)

        Logger.base.info(
            f'🎯 [SSE] Broadcast luminaire {luminaire_id}: delivered={delivered}, removed={removed}'
        )

    async def heartbeat(self) -> None:
        subscribers = self._subscribers
        if not subscribers:
            return

        Logger.base.debug(f'💓 [SSE] Sending heartbeat to {len(subscribers)} subscribers')

        event = HeartbeatEvent(
            timestamp=datetime.now(timezone.utc),
            delivery_id=self._next_delivery_id(),
        )
        delivered, removed = self._fan_out(event=event, subscribers=subscribers)

        if removed:
            Logger.base.info(f'💓 [SSE] Heartbeat: {delivered} active, {removed} removed')

    def active_count(self) -> int:
        return sum(1 for handle in self._subscribers if handle.subscriber.is_active)

    # ============================ Heartbeat scheduling ============================

    async def start(self, *, task_group: TaskGroup) -> None:
        """Start the periodic heartbeat in the given task group"""
        task_group.start_soon(self._heartbeat_loop)  # pyrefly: ignore[bad-argument-type]
        Logger.base.info(f'💓 [SSE] Heartbeat started (every {self._heartbeat_interval}s)')

    async def _heartbeat_loop(self) -> None:
        while True:
            await anyio.sleep(self._heartbeat_interval)
            await self.heartbeat()

    # ============================ Internals ============================

    def _fan_out(
        self, *, event: LuminaireStateEvent, subscribers: Tuple[SubscriberHandle, ...]
    ) -> tuple[int, int]:
        delivered = 0
        removed = 0
        for handle in subscribers:
            if handle.subscriber.is_removed:
                continue
            if handle.deliver(event):
                delivered += 1
            else:
                Logger.base.warning(
                    f'❌ [SSE] Removing subscriber {handle.subscriber_id} after failed '
                    f'{event.event_type.value} delivery'
                )
                self._remove(handle, reason=SubscriberRemovalReason.DELIVERY_FAILED)
                removed += 1

        metrics.record_delivery(event_type=event.event_type.value, delivered=delivered)
        return delivered, removed

    def _remove(self, handle: SubscriberHandle, *, reason: SubscriberRemovalReason) -> None:
        if not handle.subscriber.remove():
            return

        self._subscribers = tuple(s for s in self._subscribers if s is not handle)
        handle.channel.close()

        remaining = self.active_count()
        metrics.record_subscriber_removed(reason=reason.value, active=remaining)
        Logger.base.info(
            f'📡 [SSE] Subscriber {handle.subscriber_id} removed ({reason.value}) '
            f'(remaining subscribers: {remaining})'
        )

    def _next_delivery_id(self) -> str:
        # Wall-clock milliseconds, bumped when two events land in the same millisecond
        now_ms = time.time_ns() // 1_000_000
        self._last_delivery_id = max(now_ms, self._last_delivery_id + 1)
        return str(self._last_delivery_id)
