"""
Luminaire State Events

Outbound messages for real-time subscribers. Three variants:
- InitialStateEvent: full id -> is_on snapshot, sent once to each new subscriber
- StateChangeEvent: one luminaire flipped on or off
- HeartbeatEvent: carries no state, only forces a write to detect dead clients
"""

from datetime import datetime
from types import MappingProxyType
from typing import ClassVar, Mapping

import attrs

from src.service.automation.domain.enum.luminaire_event_type import LuminaireEventType


def _freeze(states: Mapping[int, bool]) -> Mapping[int, bool]:
    return MappingProxyType(dict(states))


@attrs.define(frozen=True)
class InitialStateEvent:
    event_type: ClassVar[LuminaireEventType] = LuminaireEventType.INITIAL_STATE

    all_states: Mapping[int, bool] = attrs.field(converter=_freeze)
    timestamp: datetime
    delivery_id: str


@attrs.define(frozen=True)
class StateChangeEvent:
    event_type: ClassVar[LuminaireEventType] = LuminaireEventType.STATE_CHANGE

    luminaire_id: int
    is_on: bool
    timestamp: datetime
    delivery_id: str


@attrs.define(frozen=True)
class HeartbeatEvent:
    event_type: ClassVar[LuminaireEventType] = LuminaireEventType.HEARTBEAT

    timestamp: datetime
    delivery_id: str


LuminaireStateEvent = InitialStateEvent | StateChangeEvent | HeartbeatEvent
