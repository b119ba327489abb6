from abc import ABC, abstractmethod

from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity


class ILuminaireCommandRepo(ABC):
    """Luminaire write side"""

    @abstractmethod
    async def create(self, *, luminaire: LuminaireEntity) -> LuminaireEntity:
        pass

    @abstractmethod
    async def update(self, *, luminaire: LuminaireEntity) -> LuminaireEntity:
        pass

    @abstractmethod
    async def delete(self, *, luminaire_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_by_environment(self, *, environment_id: int) -> int:
        """Returns how many luminaires were removed"""
        pass
