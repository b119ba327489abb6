"""
Stream Luminaire State Use Case

SSE streaming of luminaire state: an initial_state snapshot, then every
state_change and heartbeat the hub pushes, until the client goes away.
"""

from collections.abc import AsyncGenerator
import math
from typing import Optional, Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_luminaire_broadcaster import ILuminaireBroadcaster
from src.service.automation.domain.domain_event.luminaire_state_event import LuminaireStateEvent


class StreamLuminaireStateUseCase:
    """Use case for streaming luminaire state via SSE."""

    def __init__(
        self, *, broadcaster: ILuminaireBroadcaster, timeout_seconds: Optional[float] = None
    ) -> None:
        self.broadcaster = broadcaster
        self.timeout_seconds = timeout_seconds

    @classmethod
    @inject
    def depends(
        cls,
        broadcaster: ILuminaireBroadcaster = Depends(Provide[Container.luminaire_broadcast_hub]),
    ) -> Self:
        return cls(broadcaster=broadcaster, timeout_seconds=settings.SSE_SUBSCRIBER_TIMEOUT_SECONDS)

    async def stream(self) -> AsyncGenerator[LuminaireStateEvent, None]:
        """
        Stream state events to one client.

        Lifecycle signals sent back to the hub:
        - client disconnect (cancellation) or end of stream -> complete()
        - SSE_SUBSCRIBER_TIMEOUT_SECONDS elapsed -> time_out()
        - anything else going wrong -> fail(error)
        """
        handle = await self.broadcaster.subscribe()
        events = handle.events()
        deadline = (
            math.inf
            if self.timeout_seconds is None
            else anyio.current_time() + self.timeout_seconds
        )
        timed_out = False

        try:
            while True:
                # Only the wait for the next event is bounded, never the yield
                with anyio.CancelScope(deadline=deadline) as scope:
                    event = await anext(events, None)
                if scope.cancelled_caught:
                    timed_out = True
                    break
                if event is None:
                    break
                yield event

        except anyio.get_cancelled_exc_class():
            Logger.base.info(f'📡 [SSE] Client {handle.subscriber_id} disconnected')
            handle.complete()
            raise
        except GeneratorExit:
            # Response closed the generator while it was suspended at a yield
            handle.complete()
            raise
        except Exception as e:
            Logger.base.error(
                f'❌ [SSE] Error in stream for subscriber {handle.subscriber_id}: '
                f'{type(e).__name__}: {e}'
            )
            handle.fail(e)
            raise
        finally:
            await events.aclose()

        if timed_out:
            Logger.base.info(f'⏱️ [SSE] Subscriber {handle.subscriber_id} timed out')
            handle.time_out()
        else:
            handle.complete()
