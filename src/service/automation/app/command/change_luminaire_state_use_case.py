from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.automation_metrics import metrics
from src.service.automation.app.interface.i_luminaire_broadcaster import ILuminaireBroadcaster
from src.service.automation.app.interface.i_luminaire_state_store import ILuminaireStateStore


class ChangeLuminaireStateUseCase:
    """
    Turn a luminaire on/off or toggle it, then tell every SSE subscriber

    Flow:
    1. Commit the new flag to the state store
    2. Publish a state_change event through the broadcast hub

    The store write always completes before the broadcast starts, so a
    subscriber never sees a value the store does not hold yet.
    """

    def __init__(
        self,
        *,
        state_store: ILuminaireStateStore,
        broadcaster: ILuminaireBroadcaster,
    ) -> None:
        self.state_store = state_store
        self.broadcaster = broadcaster
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        state_store: ILuminaireStateStore = Depends(Provide[Container.luminaire_state_store]),
        broadcaster: ILuminaireBroadcaster = Depends(Provide[Container.luminaire_broadcast_hub]),
    ) -> Self:
        return cls(state_store=state_store, broadcaster=broadcaster)

    @Logger.io
    async def turn_on(self, *, luminaire_id: int) -> bool:
        with self.tracer.start_as_current_span(
            'use_case.turn_on', attributes={'luminaire.id': luminaire_id}
        ):
            await self.state_store.set_state(luminaire_id=luminaire_id, is_on=True)
            await self.broadcaster.publish(luminaire_id=luminaire_id, is_on=True)

        metrics.record_state_change(action='turn_on')
        return True

    @Logger.io
    async def turn_off(self, *, luminaire_id: int) -> bool:
        with self.tracer.start_as_current_span(
            'use_case.turn_off', attributes={'luminaire.id': luminaire_id}
        ):
            await self.state_store.set_state(luminaire_id=luminaire_id, is_on=False)
            await self.broadcaster.publish(luminaire_id=luminaire_id, is_on=False)

        metrics.record_state_change(action='turn_off')
        return False

    @Logger.io
    async def toggle(self, *, luminaire_id: int) -> bool:
        """
        Returns:
            The new flag (True = on)
        """
        with self.tracer.start_as_current_span(
            'use_case.toggle', attributes={'luminaire.id': luminaire_id}
        ) as span:
            new_state = await self.state_store.toggle(luminaire_id=luminaire_id)
            span.set_attribute('luminaire.is_on', new_state)
            await self.broadcaster.publish(luminaire_id=luminaire_id, is_on=new_state)

        metrics.record_state_change(action='toggle')
        return new_state
