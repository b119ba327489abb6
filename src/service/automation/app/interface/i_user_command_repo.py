from abc import ABC, abstractmethod

from src.service.automation.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User write side"""

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        pass

    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        pass
