"""
In-memory Luminaire State Store

Process-lifetime map of luminaire id -> is_on. Nothing is persisted; entries
are created on first write and never deleted (a stale id simply keeps its
last known flag).
"""

from types import MappingProxyType
from typing import Dict, Mapping

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_luminaire_state_store import ILuminaireStateStore


class LuminaireStateStoreImpl(ILuminaireStateStore):
    """
    Concurrency:
    - Writes (set_state / toggle) are serialized by a single lock, so a toggle
      always observes the result of the write that precedes it
    - Reads never take the lock; a dict lookup or copy sees a consistent
      mapping because writes never yield to the event loop mid-update
    """

    def __init__(self) -> None:
        self._states: Dict[int, bool] = {}
        self._write_lock = anyio.Lock()

    async def set_state(self, *, luminaire_id: int, is_on: bool) -> None:
        async with self._write_lock:
            self._states[luminaire_id] = is_on

        Logger.base.info(f'💡 [STATE] Luminaire {luminaire_id} set to {"on" if is_on else "off"}')

    async def toggle(self, *, luminaire_id: int) -> bool:
        async with self._write_lock:
            current_state = self._states.get(luminaire_id, False)
            new_state = not current_state
            self._states[luminaire_id] = new_state

        Logger.base.info(
            f'💡 [STATE] Luminaire {luminaire_id} toggled from {current_state} to {new_state}'
        )
        return new_state

    def get_state(self, *, luminaire_id: int) -> bool:
        return self._states.get(luminaire_id, False)

    def snapshot(self) -> Mapping[int, bool]:
        return MappingProxyType(dict(self._states))
