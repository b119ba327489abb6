from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_environment_query_repo import IEnvironmentQueryRepo
from src.service.automation.app.interface.i_luminaire_command_repo import ILuminaireCommandRepo
from src.service.automation.app.interface.i_luminaire_query_repo import ILuminaireQueryRepo
from src.service.automation.domain.entity.luminaire_entity import DEFAULT_COLOR, LuminaireEntity


class CreateLuminaireUseCase:
    def __init__(
        self,
        *,
        luminaire_command_repo: ILuminaireCommandRepo,
        luminaire_query_repo: ILuminaireQueryRepo,
        environment_query_repo: IEnvironmentQueryRepo,
    ) -> None:
        self.luminaire_command_repo = luminaire_command_repo
        self.luminaire_query_repo = luminaire_query_repo
        self.environment_query_repo = environment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        luminaire_command_repo: ILuminaireCommandRepo = Depends(
            Provide[Container.luminaire_repo]
        ),
        luminaire_query_repo: ILuminaireQueryRepo = Depends(Provide[Container.luminaire_repo]),
        environment_query_repo: IEnvironmentQueryRepo = Depends(
            Provide[Container.environment_repo]
        ),
    ) -> Self:
        return cls(
            luminaire_command_repo=luminaire_command_repo,
            luminaire_query_repo=luminaire_query_repo,
            environment_query_repo=environment_query_repo,
        )

    @Logger.io
    async def create(
        self,
        *,
        environment_id: int,
        name: str,
        type: str,
        status: bool = False,
        brightness: int = 0,
        color: str = DEFAULT_COLOR,
        position_x: float = 0.0,
        position_y: float = 0.0,
    ) -> LuminaireEntity:
        """
        Flow:
        1. Validate the fields (entity invariants)
        2. The environment must exist
        3. The name must be unique inside that environment (case-insensitive)
        """
        luminaire = LuminaireEntity(
            name=name,
            type=type,
            environment_id=environment_id,
            status=status,
            brightness=brightness,
            color=color,
            position_x=position_x,
            position_y=position_y,
        )

        environment = await self.environment_query_repo.get_by_id(environment_id=environment_id)
        if environment is None:
            raise NotFoundError(f'Environment not found with ID: {environment_id}')

        if await self.luminaire_query_repo.exists_by_name_in_environment(
            name=name, environment_id=environment_id
        ):
            raise DomainError(
                f"A luminaire named '{name}' already exists in environment '{environment.name}'"
            )

        created = await self.luminaire_command_repo.create(luminaire=luminaire)
        Logger.base.info(
            f'💡 [LUMINAIRE] Created luminaire {created.id} ({created.name}) '
            f'in environment {environment_id}'
        )
        return created
