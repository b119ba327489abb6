"""
Update Luminaire Use Case

Full replacement of a luminaire's editable fields (PUT) plus the two
partial changes the control panel issues on its own: brightness and color.
A luminaire never moves to another environment.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_luminaire_command_repo import ILuminaireCommandRepo
from src.service.automation.app.interface.i_luminaire_query_repo import ILuminaireQueryRepo
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity


class UpdateLuminaireUseCase:
    def __init__(
        self,
        *,
        luminaire_command_repo: ILuminaireCommandRepo,
        luminaire_query_repo: ILuminaireQueryRepo,
    ) -> None:
        self.luminaire_command_repo = luminaire_command_repo
        self.luminaire_query_repo = luminaire_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        luminaire_command_repo: ILuminaireCommandRepo = Depends(
            Provide[Container.luminaire_repo]
        ),
        luminaire_query_repo: ILuminaireQueryRepo = Depends(Provide[Container.luminaire_repo]),
    ) -> Self:
        return cls(
            luminaire_command_repo=luminaire_command_repo,
            luminaire_query_repo=luminaire_query_repo,
        )

    async def _get_or_raise(self, luminaire_id: int) -> LuminaireEntity:
        luminaire = await self.luminaire_query_repo.get_by_id(luminaire_id=luminaire_id)
        if luminaire is None:
            raise NotFoundError(f'Luminaire not found with ID: {luminaire_id}')
        return luminaire

    @Logger.io
    async def update(
        self,
        *,
        luminaire_id: int,
        name: str,
        type: str,
        status: bool,
        brightness: int,
        color: str,
        position_x: float,
        position_y: float,
    ) -> LuminaireEntity:
        luminaire = await self._get_or_raise(luminaire_id)

        renamed = not luminaire.has_same_name(name)
        if renamed and await self.luminaire_query_repo.exists_by_name_in_environment(
            name=name, environment_id=luminaire.environment_id, exclude_id=luminaire_id
        ):
            raise DomainError(
                f"A luminaire named '{name}' already exists in environment "
                f'{luminaire.environment_id}'
            )

        luminaire.name = name
        luminaire.type = type
        luminaire.status = status
        luminaire.change_brightness(brightness)
        luminaire.change_color(color)
        luminaire.position_x = position_x
        luminaire.position_y = position_y

        updated = await self.luminaire_command_repo.update(luminaire=luminaire)
        Logger.base.info(f'💡 [LUMINAIRE] Updated luminaire {luminaire_id}')
        return updated

    @Logger.io
    async def change_brightness(self, *, luminaire_id: int, brightness: int) -> LuminaireEntity:
        luminaire = await self._get_or_raise(luminaire_id)
        luminaire.change_brightness(brightness)

        updated = await self.luminaire_command_repo.update(luminaire=luminaire)
        Logger.base.info(f'🔆 [LUMINAIRE] Luminaire {luminaire_id} brightness set to {brightness}')
        return updated

    @Logger.io
    async def change_color(self, *, luminaire_id: int, color: str) -> LuminaireEntity:
        luminaire = await self._get_or_raise(luminaire_id)
        luminaire.change_color(color)

        updated = await self.luminaire_command_repo.update(luminaire=luminaire)
        Logger.base.info(f'🎨 [LUMINAIRE] Luminaire {luminaire_id} color set to {color}')
        return updated
