"""
Memory Stream Channel

Bounded anyio memory object stream between the broadcast hub (writer) and one
SSE response (reader).

Memory Management:
- Max buffer: SSE_SUBSCRIBER_BUFFER_SIZE events
- A full buffer means the client stopped reading; send() reports failure
  and the hub drops the subscriber rather than blocking the broadcast
"""

from collections.abc import AsyncGenerator

from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_subscriber_channel import ISubscriberChannel
from src.service.automation.domain.domain_event.luminaire_state_event import LuminaireStateEvent


class MemoryStreamChannel(ISubscriberChannel):
    def __init__(self, *, max_buffer_size: int = 100) -> None:
        self._send_stream, self._receive_stream = create_memory_object_stream[
            LuminaireStateEvent
        ](max_buffer_size=max_buffer_size)

    def send(self, event: LuminaireStateEvent) -> bool:
        try:
            self._send_stream.send_nowait(event)
            return True
        except WouldBlock:
            Logger.base.warning(
                f'⚠️ [SSE] Subscriber buffer full, dropping subscriber '
                f'(type={event.event_type.value})'
            )
            return False
        except (BrokenResourceError, ClosedResourceError):
            # Reader went away (client disconnected) or channel already closed
            return False

    def close(self) -> None:
        self._send_stream.close()

    async def events(self) -> AsyncGenerator[LuminaireStateEvent, None]:
        async with self._receive_stream:
            async for event in self._receive_stream:
                yield event
