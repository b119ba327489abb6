from collections.abc import AsyncGenerator
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from sse_starlette.sse import EventSourceResponse

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.command.change_luminaire_state_use_case import (
    ChangeLuminaireStateUseCase,
)
from src.service.automation.app.query.get_luminaire_state_use_case import GetLuminaireStateUseCase
from src.service.automation.app.query.stream_luminaire_state_use_case import (
    StreamLuminaireStateUseCase,
)
from src.service.automation.domain.domain_event.luminaire_state_event import (
    HeartbeatEvent,
    InitialStateEvent,
    LuminaireStateEvent,
    StateChangeEvent,
)
from src.service.automation.driving_adapter.schema.luminaire_schema import (
    HeartbeatSseResponse,
    InitialStateSseResponse,
    LuminaireCommandResponse,
    LuminaireStateResponse,
    LuminaireStatesResponse,
    StateChangeSseResponse,
)


router = APIRouter()


def to_sse_message(event: LuminaireStateEvent) -> dict:
    """Frame a hub event as an sse-starlette message (event name, id, JSON data)."""
    match event:
        case InitialStateEvent():
            response = InitialStateSseResponse(
                all_states=dict(event.all_states), timestamp=event.timestamp
            )
        case StateChangeEvent():
            response = StateChangeSseResponse(
                luminaire_id=event.luminaire_id, is_on=event.is_on, timestamp=event.timestamp
            )
        case HeartbeatEvent():
            response = HeartbeatSseResponse(timestamp=event.timestamp)

    return {
        'event': event.event_type.value,
        'id': event.delivery_id,
        'data': response.model_dump_json(by_alias=True),
    }


@router.get('/events', status_code=status.HTTP_200_OK)
async def stream_luminaire_events(
    use_case: StreamLuminaireStateUseCase = Depends(StreamLuminaireStateUseCase.depends),
) -> EventSourceResponse:
    """SSE real-time push of luminaire on/off state (initial_state, state_change, heartbeat)."""

    async def event_generator() -> AsyncGenerator[dict, None]:
        async for event in use_case.stream():
            yield to_sse_message(event)

    return EventSourceResponse(event_generator())


@router.post(
    '/{luminaire_id}/turn-on',
    response_model=LuminaireCommandResponse,
    status_code=status.HTTP_200_OK,
)
@Logger.io
async def turn_on_luminaire(
    luminaire_id: int,
    use_case: ChangeLuminaireStateUseCase = Depends(ChangeLuminaireStateUseCase.depends),
) -> LuminaireCommandResponse:
    is_on = await use_case.turn_on(luminaire_id=luminaire_id)
    return LuminaireCommandResponse(
        message='Luminaire turned on successfully',
        luminaire_id=luminaire_id,
        is_on=is_on,
        timestamp=datetime.now(timezone.utc),
    )


@router.post(
    '/{luminaire_id}/turn-off',
    response_model=LuminaireCommandResponse,
    status_code=status.HTTP_200_OK,
)
@Logger.io
async def turn_off_luminaire(
    luminaire_id: int,
    use_case: ChangeLuminaireStateUseCase = Depends(ChangeLuminaireStateUseCase.depends),
) -> LuminaireCommandResponse:
    is_on = await use_case.turn_off(luminaire_id=luminaire_id)
    return LuminaireCommandResponse(
        message='Luminaire turned off successfully',
        luminaire_id=luminaire_id,
        is_on=is_on,
        timestamp=datetime.now(timezone.utc),
    )


@router.post(
    '/{luminaire_id}/toggle',
    response_model=LuminaireCommandResponse,
    status_code=status.HTTP_200_OK,
)
@Logger.io
async def toggle_luminaire(
    luminaire_id: int,
    use_case: ChangeLuminaireStateUseCase = Depends(ChangeLuminaireStateUseCase.depends),
) -> LuminaireCommandResponse:
    new_state = await use_case.toggle(luminaire_id=luminaire_id)
    return LuminaireCommandResponse(
        message='Luminaire turned on' if new_state else 'Luminaire turned off',
        luminaire_id=luminaire_id,
        is_on=new_state,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    '/{luminaire_id}/state',
    response_model=LuminaireStateResponse,
    status_code=status.HTTP_200_OK,
)
async def get_luminaire_state(
    luminaire_id: int,
    use_case: GetLuminaireStateUseCase = Depends(GetLuminaireStateUseCase.depends),
) -> LuminaireStateResponse:
    return LuminaireStateResponse(
        luminaire_id=luminaire_id,
        is_on=use_case.get_state(luminaire_id=luminaire_id),
        timestamp=datetime.now(timezone.utc),
    )


@router.get('/states', response_model=LuminaireStatesResponse, status_code=status.HTTP_200_OK)
async def get_all_luminaire_states(
    use_case: GetLuminaireStateUseCase = Depends(GetLuminaireStateUseCase.depends),
) -> LuminaireStatesResponse:
    return LuminaireStatesResponse(
        states=use_case.get_all_states(), timestamp=datetime.now(timezone.utc)
    )
