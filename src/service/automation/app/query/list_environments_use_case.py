from typing import List, Optional, Self, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.app.interface.i_luminaire_query_repo import ILuminaireQueryRepo
from src.service.automation.domain.entity.environment_entity import EnvironmentEntity
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity
from src.service.automation.domain.value_object.page import Page


class ListEnvironmentsUseCase:
    def __init__(
        self,
        *,
        environment_query_repo: IEnvironmentQueryRepo,
        luminaire_query_repo: ILuminaireQueryRepo,
    ) -> None:
        self.environment_query_repo = environment_query_repo
        self.luminaire_query_repo = luminaire_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        environment_query_repo: IEnvironmentQueryRepo = Depends(
            Provide[Container.environment_repo]
        ),
        luminaire_query_repo: ILuminaireQueryRepo = Depends(Provide[Container.luminaire_repo]),
    ) -> Self:
        return cls(
            environment_query_repo=environment_query_repo,
            luminaire_query_repo=luminaire_query_repo,
        )

    @Logger.io
    async def list_page(
        self, *, page: int, size: int, search: Optional[str] = None
    ) -> Page[EnvironmentEntity]:
        """
        Environments ordered by name, one page at a time.

        Args:
            search: When non-blank, keep only environments whose name or
                description contains it (case-insensitive)
        """
        if search and search.strip():
            environments = await self.environment_query_repo.search(term=search.strip())
        else:
            environments = await self.environment_query_repo.list_all()
        return Page.slice(environments, page=page, size=size)

    @Logger.io
    async def list_with_luminaires(
        self,
    ) -> List[Tuple[EnvironmentEntity, List[LuminaireEntity]]]:
        result = []
        for environment in await self.environment_query_repo.list_all():
            luminaires = await self.luminaire_query_repo.list_all(
                environment_id=environment.id
            )
            result.append((environment, luminaires))
        return result
