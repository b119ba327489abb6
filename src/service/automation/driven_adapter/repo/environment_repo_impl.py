"""
In-memory Environment Repository - Combines Command and Query operations

Records are handed out as copies; callers change them and save through
update(), so a rejected change never leaks into the stored record.
"""

from datetime import datetime, timezone
import itertools
from typing import Dict, List, Optional

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_command_repo import (
    IEnvironmentCommandRepo,
)
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.domain.entity.environment_entity import EnvironmentEntity


class EnvironmentRepoImpl(IEnvironmentCommandRepo, IEnvironmentQueryRepo):
    def __init__(self) -> None:
        self._environments: Dict[int, EnvironmentEntity] = {}
        self._ids = itertools.count(1)

    # ============================ Query ============================

    async def get_by_id(self, *, environment_id: int) -> Optional[EnvironmentEntity]:
        environment = self._environments.get(environment_id)
        return attrs.evolve(environment) if environment else None

    async def list_all(self) -> List[EnvironmentEntity]:
        return [
            attrs.evolve(environment)
            for environment in sorted(
                self._environments.values(), key=lambda e: (e.name.casefold(), e.id)
            )
        ]

    async def search(self, *, term: str) -> List[EnvironmentEntity]:
        needle = term.casefold()
        return [
            environment
            for environment in await self.list_all()
            if needle in environment.name.casefold()
            or needle in (environment.description or '').casefold()
        ]

    async def exists_by_id(self, *, environment_id: int) -> bool:
        return environment_id in self._environments

    async def exists_by_name(self, *, name: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            environment.has_same_name(name)
            for environment in self._environments.values()
            if environment.id != exclude_id
        )

    # ============================ Command ============================

    @Logger.io
    async def create(self, *, environment: EnvironmentEntity) -> EnvironmentEntity:
        now = datetime.now(timezone.utc)
        stored = attrs.evolve(environment, id=next(self._ids), created_at=now, updated_at=now)
        self._environments[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    @Logger.io
    async def update(self, *, environment: EnvironmentEntity) -> EnvironmentEntity:
        existing = self._environments.get(environment.id)  # type: ignore[arg-type]
        if existing is None:
            raise NotFoundError(f'Environment not found with ID: {environment.id}')

        stored = attrs.evolve(
            environment, created_at=existing.created_at, updated_at=datetime.now(timezone.utc)
        )
        self._environments[existing.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    @Logger.io
    async def delete(self, *, environment_id: int) -> bool:
        return self._environments.pop(environment_id, None) is not None
