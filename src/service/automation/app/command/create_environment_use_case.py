from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_command_repo import (
    IEnvironmentCommandRepo,
)
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.domain.entity.environment_entity import EnvironmentEntity


class CreateEnvironmentUseCase:
    def __init__(
        self,
        *,
        environment_command_repo: IEnvironmentCommandRepo,
        environment_query_repo: IEnvironmentQueryRepo,
    ) -> None:
        self.environment_command_repo = environment_command_repo
        self.environment_query_repo = environment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        environment_command_repo: IEnvironmentCommandRepo = Depends(
            Provide[Container.environment_repo]
        ),
        environment_query_repo: IEnvironmentQueryRepo = Depends(
            Provide[Container.environment_repo]
        ),
    ) -> Self:
        return cls(
            environment_command_repo=environment_command_repo,
            environment_query_repo=environment_query_repo,
        )

    @Logger.io
    async def create(self, *, name: str, description: Optional[str] = None) -> EnvironmentEntity:
        """
        Raises:
            DomainError: another environment already has this name (case-insensitive)
            ValueError: name/description outside the allowed lengths
        """
        environment = EnvironmentEntity(name=name, description=description)

        if await self.environment_query_repo.exists_by_name(name=name):
            raise DomainError(f'An environment named {name} already exists')

        created = await self.environment_command_repo.create(environment=environment)
        Logger.base.info(f'🏠 [ENVIRONMENT] Created environment {created.id} ({created.name})')
        return created
