"""
Subscriber Handle

What the transport layer holds for one SSE client. It exposes:
- events(): the stream of events the hub pushed to this client
- on_completion / on_timeout / on_error: register lifecycle callbacks
- complete() / time_out() / fail(): signal those lifecycle events

The hub registers its own removal callback on all three signals; it only
needs to know that the subscriber is gone, not why.
"""

from collections.abc import AsyncGenerator
from typing import Callable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_subscriber_channel import ISubscriberChannel
from src.service.automation.domain.domain_event.luminaire_state_event import LuminaireStateEvent
from src.service.automation.domain.entity.subscriber_entity import SubscriberEntity
from src.service.automation.domain.enum.subscriber_status import SubscriberStatus


LifecycleCallback = Callable[[], None]
ErrorCallback = Callable[[Optional[BaseException]], None]


class SubscriberHandle:
    def __init__(self, *, subscriber: SubscriberEntity, channel: ISubscriberChannel) -> None:
        self.subscriber = subscriber
        self.channel = channel
        self._completion_callbacks: List[LifecycleCallback] = []
        self._timeout_callbacks: List[LifecycleCallback] = []
        self._error_callbacks: List[ErrorCallback] = []
        self._signalled = False

    @property
    def subscriber_id(self) -> int:
        return self.subscriber.id

    @property
    def status(self) -> SubscriberStatus:
        return self.subscriber.status

    def deliver(self, event: LuminaireStateEvent) -> bool:
        if self.subscriber.is_removed:
            return False
        return self.channel.send(event)

    def events(self) -> AsyncGenerator[LuminaireStateEvent, None]:
        return self.channel.events()

    # ---------------------------- callback registration ----------------------------

    def on_completion(self, callback: LifecycleCallback) -> None:
        self._completion_callbacks.append(callback)

    def on_timeout(self, callback: LifecycleCallback) -> None:
        self._timeout_callbacks.append(callback)

    def on_error(self, callback: ErrorCallback) -> None:
        self._error_callbacks.append(callback)

    # ---------------------------- transport signals ----------------------------
    # A stream ends once: the first signal wins and later ones are ignored.

    def _claim_signal(self) -> bool:
        if self._signalled:
            return False
        self._signalled = True
        return True

    def complete(self) -> None:
        if not self._claim_signal():
            return
        for callback in self._completion_callbacks:
            callback()

    def time_out(self) -> None:
        if not self._claim_signal():
            return
        for callback in self._timeout_callbacks:
            callback()

    def fail(self, error: Optional[BaseException] = None) -> None:
        if not self._claim_signal():
            return
        Logger.base.warning(f'⚠️ [SSE] Subscriber {self.subscriber_id} transport error: {error}')
        for callback in self._error_callbacks:
            callback(error)
