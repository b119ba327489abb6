"""
Luminaire State Store Interface

Single source of truth for the current on/off flag of every luminaire.
All operations are total: unknown ids read as off, nothing raises.
"""

from typing import Mapping, Protocol


class ILuminaireStateStore(Protocol):
    async def set_state(self, *, luminaire_id: int, is_on: bool) -> None:
        """Unconditionally overwrite the flag for luminaire_id"""
        ...

    async def toggle(self, *, luminaire_id: int) -> bool:
        """
        Flip the flag (absent counts as off) and return the new value

        Note:
            Atomic with respect to concurrent toggle/set_state calls
        """
        ...

    def get_state(self, *, luminaire_id: int) -> bool:
        """Stored flag, or False when luminaire_id was never written"""
        ...

    def snapshot(self) -> Mapping[int, bool]:
        """Immutable point-in-time copy of every stored flag"""
        ...
