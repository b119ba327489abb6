"""
Luminaire Event Type Enum - Domain Value Object

Names of the events pushed to real-time subscribers. The value doubles as
the SSE `event:` field on the wire.
"""

from enum import Enum


class LuminaireEventType(str, Enum):
    INITIAL_STATE = 'initial_state'
    STATE_CHANGE = 'state_change'
    HEARTBEAT = 'heartbeat'
