import pytest

from apps.event_hub.models import EventLog
from apps.event_hub.services.event_bus import EventBus
from apps.event_hub.services.factory import get_event_bus

received = []


def record_payload(payload):
    received.append(payload)


def failing_listener(payload):
    raise RuntimeError("listener failed")


@pytest.fixture
def event_bus():
    bus = get_event_bus()
    saved = {name: list(listeners) for name, listeners in bus._listeners.items()}
    received.clear()
    yield bus
    bus.clear_listeners()
    bus._listeners.update(saved)


@pytest.fixture
def sample_payload():
    return {'key': 'payout_fee_bank_ach_cents', 'value': '50'}


def test_factory_returns_singleton():
    assert get_event_bus() is get_event_bus()
    assert EventBus() is get_event_bus()


@pytest.mark.django_db
class TestEventBus:
    def test_async_emit_enqueues_listener(self, event_bus, sample_payload, mock_django_q):
        event_bus.register_listener('fee_changed', record_payload)

        event_bus.emit_event('fee_changed', sample_payload)

        mock_django_q.assert_called_once_with(
            'apps.event_hub.tests.test_event_bus.record_payload',
            sample_payload,
            group='event.record_payload'
        )
        assert received == []

    def test_sync_emit_calls_listeners(self, event_bus, sample_payload, mocker):
        other_listener = mocker.Mock()
        event_bus.register_listener('fee_changed', record_payload)
        event_bus.register_listener('fee_changed', other_listener)

        event_bus.emit_event('fee_changed', sample_payload, is_async=False)

        assert received == [sample_payload]
        other_listener.assert_called_once_with(sample_payload)

    def test_listener_registered_once(self, event_bus, sample_payload):
        event_bus.register_listener('fee_changed', record_payload)
        event_bus.register_listener('fee_changed', record_payload)

        event_bus.emit_event('fee_changed', sample_payload, is_async=False)

        assert received == [sample_payload]

    def test_listener_error_does_not_reach_emitter(self, event_bus, sample_payload, mocker):
        report_error = mocker.patch.object(event_bus.backend, 'report_error')
        event_bus.register_listener('fee_changed', failing_listener)
        event_bus.register_listener('fee_changed', record_payload)

        event_bus.emit_event('fee_changed', sample_payload, is_async=False)

        assert received == [sample_payload]
        assert report_error.called

    def test_no_listeners(self, event_bus, sample_payload, mock_django_q):
        event_bus.emit_event('nobody_listens', sample_payload)

        mock_django_q.assert_not_called()
        assert EventLog.objects.filter(event_name='nobody_listens').exists()

    def test_event_logging(self, event_bus, sample_payload):
        event_bus.emit_event('fee_changed', sample_payload)

        logged_event = EventLog.objects.get(event_name='fee_changed')
        assert logged_event.payload == sample_payload
        assert logged_event.processed is False

    def test_remove_listener(self, event_bus, sample_payload):
        event_bus.register_listener('fee_changed', record_payload)
        event_bus.remove_listener('fee_changed', record_payload)

        event_bus.emit_event('fee_changed', sample_payload, is_async=False)

        assert received == []
