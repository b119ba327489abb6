from typing import Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.automation.app.interface.i_luminaire_state_store import ILuminaireStateStore


class GetLuminaireStateUseCase:
    def __init__(self, *, state_store: ILuminaireStateStore) -> None:
        self.state_store = state_store

    @classmethod
    @inject
    def depends(
        cls,
        state_store: ILuminaireStateStore = Depends(Provide[Container.luminaire_state_store]),
    ) -> Self:
        return cls(state_store=state_store)

    def get_state(self, *, luminaire_id: int) -> bool:
        return self.state_store.get_state(luminaire_id=luminaire_id)

    def get_all_states(self) -> Dict[int, bool]:
        return dict(self.state_store.snapshot())
