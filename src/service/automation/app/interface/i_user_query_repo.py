from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.automation.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User read side - lookups and credential checks"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def list_usernames(self) -> List[str]:
        pass

    @abstractmethod
    async def verify_password(self, username: str, plain_password: str) -> Optional[UserEntity]:
        pass
