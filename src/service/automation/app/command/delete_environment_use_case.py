from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_command_repo import (
    IEnvironmentCommandRepo,
)
from src.service.automation.app.interface.i_luminaire_command_repo import ILuminaireCommandRepo


class DeleteEnvironmentUseCase:
    """
    Delete an environment together with every luminaire in it

    Live on/off flags in the luminaire state store are keyed by id only and
    are not touched.
    """

    def __init__(
        self,
        *,
        environment_command_repo: IEnvironmentCommandRepo,
        luminaire_command_repo: ILuminaireCommandRepo,
    ) -> None:
        self.environment_command_repo = environment_command_repo
        self.luminaire_command_repo = luminaire_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        environment_command_repo: IEnvironmentCommandRepo = Depends(
            Provide[Container.environment_repo]
        ),
        luminaire_command_repo: ILuminaireCommandRepo = Depends(
            Provide[Container.luminaire_repo]
        ),
    ) -> Self:
        return cls(
            environment_command_repo=environment_command_repo,
            luminaire_command_repo=luminaire_command_repo,
        )

    @Logger.io
    async def delete(self, *, environment_id: int) -> None:
        if not await self.environment_command_repo.delete(environment_id=environment_id):
            raise NotFoundError(f'Environment not found with ID: {environment_id}')

        removed = await self.luminaire_command_repo.delete_by_environment(
            environment_id=environment_id
        )
        Logger.base.info(
            f'🗑️ [ENVIRONMENT] Deleted environment {environment_id} and {removed} luminaires'
        )
