from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.domain.entity.environment_entity import EnvironmentEntity


class GetEnvironmentUseCase:
    def __init__(self, *, environment_query_repo: IEnvironmentQueryRepo) -> None:
        self.environment_query_repo = environment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        environment_query_repo: IEnvironmentQueryRepo = Depends(
            Provide[Container.environment_repo]
        ),
    ) -> Self:
        return cls(environment_query_repo=environment_query_repo)

    @Logger.io
    async def get_by_id(self, *, environment_id: int) -> EnvironmentEntity:
        environment = await self.environment_query_repo.get_by_id(environment_id=environment_id)
        if environment is None:
            Logger.base.warning(f'⚠️ [ENVIRONMENT] Environment {environment_id} not found')
            raise NotFoundError(f'Environment not found with ID: {environment_id}')
        return environment

    async def exists(self, *, environment_id: int) -> bool:
        return await self.environment_query_repo.exists_by_id(environment_id=environment_id)
