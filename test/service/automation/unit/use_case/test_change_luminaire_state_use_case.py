"""
Unit tests for ChangeLuminaireStateUseCase

Focus:
1. The store is written before the hub publishes
2. The published value is the value that was stored
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.service.automation.app.command.change_luminaire_state_use_case import (
    ChangeLuminaireStateUseCase,
)


@pytest.mark.unit
class TestChangeLuminaireState:
    @pytest.fixture
    def call_order(self):
        return []

    @pytest.fixture
    def state_store(self, call_order):
        store = MagicMock()
        store.set_state = AsyncMock(side_effect=lambda **_: call_order.append('store'))
        store.toggle = AsyncMock(return_value=True)
        return store

    @pytest.fixture
    def broadcaster(self, call_order):
        hub = MagicMock()
        hub.publish = AsyncMock(side_effect=lambda **_: call_order.append('publish'))
        return hub

    @pytest.fixture
    def use_case(self, state_store, broadcaster):
        return ChangeLuminaireStateUseCase(state_store=state_store, broadcaster=broadcaster)

    @pytest.mark.asyncio
    async def test_turn_on(self, use_case, state_store, broadcaster):
        result = await use_case.turn_on(luminaire_id=5)

        assert result is True
        state_store.set_state.assert_awaited_once_with(luminaire_id=5, is_on=True)
        broadcaster.publish.assert_awaited_once_with(luminaire_id=5, is_on=True)

    @pytest.mark.asyncio
    async def test_turn_off(self, use_case, state_store, broadcaster):
        result = await use_case.turn_off(luminaire_id=5)

        assert result is False
        state_store.set_state.assert_awaited_once_with(luminaire_id=5, is_on=False)
        broadcaster.publish.assert_awaited_once_with(luminaire_id=5, is_on=False)

    @pytest.mark.asyncio
    async def test_store_is_written_before_publish(self, use_case, call_order):
        await use_case.turn_on(luminaire_id=1)

        assert call_order == ['store', 'publish']

    @pytest.mark.asyncio
    @pytest.mark.parametrize('new_state', [True, False])
    async def test_toggle_publishes_the_new_state(
        self, use_case, state_store, broadcaster, new_state
    ):
        state_store.toggle.return_value = new_state

        result = await use_case.toggle(luminaire_id=3)

        assert result is new_state
        state_store.toggle.assert_awaited_once_with(luminaire_id=3)
        broadcaster.publish.assert_awaited_once_with(luminaire_id=3, is_on=new_state)
