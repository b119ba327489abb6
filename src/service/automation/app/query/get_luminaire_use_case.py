from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_luminaire_query_repo import ILuminaireQueryRepo
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity


class GetLuminaireUseCase:
    def __init__(self, *, luminaire_query_repo: ILuminaireQueryRepo) -> None:
        self.luminaire_query_repo = luminaire_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        luminaire_query_repo: ILuminaireQueryRepo = Depends(Provide[Container.luminaire_repo]),
    ) -> Self:
        return cls(luminaire_query_repo=luminaire_query_repo)

    @Logger.io
    async def get_by_id(self, *, luminaire_id: int) -> LuminaireEntity:
        luminaire = await self.luminaire_query_repo.get_by_id(luminaire_id=luminaire_id)
        if luminaire is None:
            Logger.base.warning(f'⚠️ [LUMINAIRE] Luminaire {luminaire_id} not found')
            raise NotFoundError(f'Luminaire not found with ID: {luminaire_id}')
        return luminaire
