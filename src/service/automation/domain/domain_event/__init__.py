"""Domain Events"""

from src.service.automation.domain.domain_event.luminaire_state_event import (
    HeartbeatEvent,
    InitialStateEvent,
    LuminaireStateEvent,
    StateChangeEvent,
)

__all__ = [
    'HeartbeatEvent',
    'InitialStateEvent',
    'LuminaireStateEvent',
    'StateChangeEvent',
]
