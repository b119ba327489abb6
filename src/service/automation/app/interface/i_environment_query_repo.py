from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.automation.domain.entity.environment_entity import EnvironmentEntity


class IEnvironmentQueryRepo(ABC):
    """Environment read side"""

    @abstractmethod
    async def get_by_id(self, *, environment_id: int) -> Optional[EnvironmentEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[EnvironmentEntity]:
        """All environments ordered by name (case-insensitive)"""
        pass

    @abstractmethod
    async def search(self, *, term: str) -> List[EnvironmentEntity]:
        """Environments whose name or description contains `term`, ignoring case"""
        pass

    @abstractmethod
    async def exists_by_id(self, *, environment_id: int) -> bool:
        pass

    @abstractmethod
    async def exists_by_name(self, *, name: str, exclude_id: Optional[int] = None) -> bool:
        """Case-insensitive name lookup, optionally ignoring one environment"""
        pass
