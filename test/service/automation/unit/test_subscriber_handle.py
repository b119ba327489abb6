from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from src.service.automation.domain.domain_event.luminaire_state_event import HeartbeatEvent
from src.service.automation.domain.entity.subscriber_entity import SubscriberEntity
from src.service.automation.driven_adapter.sse.subscriber_handle import SubscriberHandle
from test.service.automation.unit.helpers import FakeChannel


@pytest.mark.unit
class TestSubscriberHandle:
    @pytest.fixture
    def channel(self):
        return FakeChannel()

    @pytest.fixture
    def handle(self, channel):
        return SubscriberHandle(subscriber=SubscriberEntity(id=7), channel=channel)

    @pytest.fixture
    def heartbeat(self):
        return HeartbeatEvent(timestamp=datetime.now(timezone.utc), delivery_id='1')

    def test_deliver_goes_through_channel(self, handle, channel, heartbeat):
        assert handle.deliver(heartbeat) is True
        assert channel.received == [heartbeat]

    def test_deliver_to_removed_subscriber_is_refused(self, handle, channel, heartbeat):
        handle.subscriber.remove()

        assert handle.deliver(heartbeat) is False
        assert channel.send_attempts == 0

    def test_each_signal_runs_only_its_callbacks(self, handle):
        on_completion, on_timeout, on_error = MagicMock(), MagicMock(), MagicMock()
        handle.on_completion(on_completion)
        handle.on_timeout(on_timeout)
        handle.on_error(on_error)

        handle.time_out()

        on_timeout.assert_called_once_with()
        on_completion.assert_not_called()
        on_error.assert_not_called()

    def test_fail_passes_the_error_along(self, handle):
        on_error = MagicMock()
        handle.on_error(on_error)
        error = RuntimeError('stream broke')

        handle.fail(error)

        on_error.assert_called_once_with(error)

    def test_multiple_callbacks_all_run(self, handle):
        first, second = MagicMock(), MagicMock()
        handle.on_completion(first)
        handle.on_completion(second)

        handle.complete()

        first.assert_called_once()
        second.assert_called_once()

    def test_subscriber_id(self, handle):
        assert handle.subscriber_id == 7

    def test_repeated_signal_runs_callbacks_once(self, handle):
        on_completion = MagicMock()
        handle.on_completion(on_completion)

        handle.complete()
        handle.complete()

        on_completion.assert_called_once_with()

    def test_first_signal_wins(self, handle):
        on_completion, on_timeout, on_error = MagicMock(), MagicMock(), MagicMock()
        handle.on_completion(on_completion)
        handle.on_timeout(on_timeout)
        handle.on_error(on_error)

        handle.time_out()
        handle.complete()
        handle.fail(RuntimeError('late'))

        on_timeout.assert_called_once_with()
        on_completion.assert_not_called()
        on_error.assert_not_called()
