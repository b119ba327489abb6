from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity
from src.service.automation.domain.value_object.luminaire_stats import LuminaireStats


class ILuminaireQueryRepo(ABC):
    """Luminaire read side"""

    @abstractmethod
    async def get_by_id(self, *, luminaire_id: int) -> Optional[LuminaireEntity]:
        pass

    @abstractmethod
    async def list_all(
        self,
        *,
        environment_id: Optional[int] = None,
        name_contains: Optional[str] = None,
        type: Optional[str] = None,
        status: Optional[bool] = None,
    ) -> List[LuminaireEntity]:
        """
        Luminaires matching every filter given, ordered by name then id.

        Args:
            environment_id: Only luminaires of this environment
            name_contains: Case-insensitive substring of the name
            type: Case-insensitive exact type
            status: Stored on/off flag
        """
        pass

    @abstractmethod
    async def exists_by_name_in_environment(
        self, *, name: str, environment_id: int, exclude_id: Optional[int] = None
    ) -> bool:
        pass

    @abstractmethod
    async def get_stats(self, *, environment_id: int) -> LuminaireStats:
        pass
