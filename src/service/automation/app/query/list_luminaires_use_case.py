from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.app.interface.i_luminaire_query_repo import ILuminaireQueryRepo
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity
from src.service.automation.domain.value_object.luminaire_stats import LuminaireStats
from src.service.automation.domain.value_object.page import Page


class ListLuminairesUseCase:
    def __init__(
        self,
        *,
        luminaire_query_repo: ILuminaireQueryRepo,
        environment_query_repo: IEnvironmentQueryRepo,
    ) -> None:
        self.luminaire_query_repo = luminaire_query_repo
        self.environment_query_repo = environment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        luminaire_query_repo: ILuminaireQueryRepo = Depends(Provide[Container.luminaire_repo]),
        environment_query_repo: IEnvironmentQueryRepo = Depends(
            Provide[Container.environment_repo]
        ),
    ) -> Self:
        return cls(
            luminaire_query_repo=luminaire_query_repo,
            environment_query_repo=environment_query_repo,
        )

    async def _ensure_environment(self, environment_id: int) -> None:
        if not await self.environment_query_repo.exists_by_id(environment_id=environment_id):
            raise NotFoundError(f'Environment not found with ID: {environment_id}')

    @Logger.io
    async def list_page(
        self,
        *,
        page: int,
        size: int,
        environment_id: Optional[int] = None,
        search: Optional[str] = None,
        type: Optional[str] = None,
        status: Optional[bool] = None,
    ) -> Page[LuminaireEntity]:
        """Filters combine (AND); blank search/type strings are ignored."""
        if environment_id is not None:
            await self._ensure_environment(environment_id)

        luminaires = await self.luminaire_query_repo.list_all(
            environment_id=environment_id,
            name_contains=search.strip() if search else None,
            type=type.strip() if type else None,
            status=status,
        )
        return Page.slice(luminaires, page=page, size=size)

    @Logger.io
    async def list_by_environment(self, *, environment_id: int) -> List[LuminaireEntity]:
        await self._ensure_environment(environment_id)
        return await self.luminaire_query_repo.list_all(environment_id=environment_id)

    @Logger.io
    async def get_stats(self, *, environment_id: int) -> LuminaireStats:
        await self._ensure_environment(environment_id)
        return await self.luminaire_query_repo.get_stats(environment_id=environment_id)
