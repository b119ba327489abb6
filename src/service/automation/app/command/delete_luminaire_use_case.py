from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_luminaire_command_repo import ILuminaireCommandRepo


class DeleteLuminaireUseCase:
    def __init__(self, *, luminaire_command_repo: ILuminaireCommandRepo) -> None:
        self.luminaire_command_repo = luminaire_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        luminaire_command_repo: ILuminaireCommandRepo = Depends(
            Provide[Container.luminaire_repo]
        ),
    ) -> Self:
        return cls(luminaire_command_repo=luminaire_command_repo)

    @Logger.io
    async def delete(self, *, luminaire_id: int) -> None:
        if not await self.luminaire_command_repo.delete(luminaire_id=luminaire_id):
            raise NotFoundError(f'Luminaire not found with ID: {luminaire_id}')

        Logger.base.info(f'🗑️ [LUMINAIRE] Deleted luminaire {luminaire_id}')
