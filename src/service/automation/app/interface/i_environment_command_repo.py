from abc import ABC, abstractmethod

from src.service.automation.domain.entity.environment_entity import EnvironmentEntity


class IEnvironmentCommandRepo(ABC):
    """Environment write side"""

    @abstractmethod
    async def create(self, *, environment: EnvironmentEntity) -> EnvironmentEntity:
        pass

    @abstractmethod
    async def update(self, *, environment: EnvironmentEntity) -> EnvironmentEntity:
        pass

    @abstractmethod
    async def delete(self, *, environment_id: int) -> bool:
        """Returns False when there was nothing to delete"""
        pass
