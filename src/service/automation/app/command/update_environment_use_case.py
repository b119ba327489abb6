from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_command_repo import (
    IEnvironmentCommandRepo,
)
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.domain.entity.environment_entity import EnvironmentEntity


class UpdateEnvironmentUseCase:
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
    async def update(
        self, *, environment_id: int, name: str, description: Optional[str] = None
    ) -> EnvironmentEntity:
        environment = await self.environment_query_repo.get_by_id(environment_id=environment_id)
        if environment is None:
            raise NotFoundError(f'Environment not found with ID: {environment_id}')

        # Renaming to its own name (in any case) is always allowed
        renamed = not environment.has_same_name(name)
        if renamed and await self.environment_query_repo.exists_by_name(
            name=name, exclude_id=environment_id
        ):
            raise DomainError(f'An environment named {name} already exists')

        environment.name = name
        environment.description = description

        updated = await self.environment_command_repo.update(environment=environment)
        Logger.base.info(f'🏠 [ENVIRONMENT] Updated environment {environment_id}')
        return updated
