"""
In-memory Luminaire Repository - Combines Command and Query operations

Same copy-in/copy-out contract as EnvironmentRepoImpl. The repo does not
check that environment_id exists; the use cases do.
"""

from datetime import datetime, timezone
import itertools
from typing import Dict, List, Optional

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_luminaire_command_repo import ILuminaireCommandRepo
from src.service.automation.app.interface.i_luminaire_query_repo import ILuminaireQueryRepo
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity
from src.service.automation.domain.value_object.luminaire_stats import LuminaireStats


class LuminaireRepoImpl(ILuminaireCommandRepo, ILuminaireQueryRepo):
    def __init__(self) -> None:
        self._luminaires: Dict[int, LuminaireEntity] = {}
        self._ids = itertools.count(1)

    # ============================ Query ============================

    async def get_by_id(self, *, luminaire_id: int) -> Optional[LuminaireEntity]:
        luminaire = self._luminaires.get(luminaire_id)
        return attrs.evolve(luminaire) if luminaire else None

    async def list_all(
        self,
        *,
        environment_id: Optional[int] = None,
        name_contains: Optional[str] = None,
        type: Optional[str] = None,
        status: Optional[bool] = None,
    ) -> List[LuminaireEntity]:
        luminaires = list(self._luminaires.values())
        if environment_id is not None:
            luminaires = [lum for lum in luminaires if lum.environment_id == environment_id]
        if name_contains:
            needle = name_contains.casefold()
            luminaires = [lum for lum in luminaires if needle in lum.name.casefold()]
        if type:
            luminaires = [lum for lum in luminaires if lum.type.casefold() == type.casefold()]
        if status is not None:
            luminaires = [lum for lum in luminaires if lum.status is status]

        return [
            attrs.evolve(luminaire)
            for luminaire in sorted(luminaires, key=lambda lum: (lum.name.casefold(), lum.id))
        ]

    async def exists_by_name_in_environment(
        self, *, name: str, environment_id: int, exclude_id: Optional[int] = None
    ) -> bool:
        return any(
            luminaire.has_same_name(name)
            for luminaire in self._luminaires.values()
            if luminaire.environment_id == environment_id and luminaire.id != exclude_id
        )

    async def get_stats(self, *, environment_id: int) -> LuminaireStats:
        in_environment = [
            lum for lum in self._luminaires.values() if lum.environment_id == environment_id
        ]
        return LuminaireStats(
            environment_id=environment_id,
            total=len(in_environment),
            active=sum(1 for lum in in_environment if lum.status),
        )

    # ============================ Command ============================

    @Logger.io
    async def create(self, *, luminaire: LuminaireEntity) -> LuminaireEntity:
        now = datetime.now(timezone.utc)
        stored = attrs.evolve(luminaire, id=next(self._ids), created_at=now, updated_at=now)
        self._luminaires[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    @Logger.io
    async def update(self, *, luminaire: LuminaireEntity) -> LuminaireEntity:
        existing = self._luminaires.get(luminaire.id)  # type: ignore[arg-type]
        if existing is None:
            raise NotFoundError(f'Luminaire not found with ID: {luminaire.id}')

        stored = attrs.evolve(
            luminaire, created_at=existing.created_at, updated_at=datetime.now(timezone.utc)
        )
        self._luminaires[existing.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    @Logger.io
    async def delete(self, *, luminaire_id: int) -> bool:
        return self._luminaires.pop(luminaire_id, None) is not None

    @Logger.io
    async def delete_by_environment(self, *, environment_id: int) -> int:
        doomed = [
            luminaire_id
            for luminaire_id, luminaire in self._luminaires.items()
            if luminaire.environment_id == environment_id
        ]
        for luminaire_id in doomed:
            del self._luminaires[luminaire_id]
        return len(doomed)
