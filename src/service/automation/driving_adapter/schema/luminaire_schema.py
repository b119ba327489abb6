from datetime import datetime
from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================ HTTP responses ============================


class LuminaireStateResponse(BaseModel):
    luminaire_id: int = Field(alias='luminariaId')
    is_on: bool = Field(alias='isOn')
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)


class LuminaireCommandResponse(LuminaireStateResponse):
    message: str

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'message': 'Luminaire turned on successfully',
                'luminariaId': 5,
                'isOn': True,
                'timestamp': '2025-01-01T12:00:00Z',
            }
        },
    )


class LuminaireStatesResponse(BaseModel):
    states: Dict[int, bool]
    timestamp: datetime


# ============================ SSE payloads ============================


class InitialStateSseResponse(BaseModel):
    event_type: Literal['initial_state'] = Field(default='initial_state', alias='eventType')
    all_states: Dict[int, bool] = Field(alias='allStates')
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)


class StateChangeSseResponse(BaseModel):
    event_type: Literal['state_change'] = Field(default='state_change', alias='eventType')
    luminaire_id: int = Field(alias='luminariaId')
    is_on: bool = Field(alias='isOn')
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)


class HeartbeatSseResponse(BaseModel):
    type: Literal['heartbeat'] = 'heartbeat'
    timestamp: datetime
