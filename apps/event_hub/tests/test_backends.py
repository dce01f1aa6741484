import pytest

from apps.event_hub.services.backends.celery import CeleryBackend
from apps.event_hub.services.backends.django_q import DjangoQBackend

received = []


def record_payload(payload):
    received.append(payload)


def failing_listener(payload):
    raise ValueError("bad payload")


@pytest.fixture(autouse=True)
def clear_received():
    received.clear()


@pytest.fixture
def sample_payload():
    return {'key': 'payout_fee_paypal_cap_cents', 'value': '2500'}


class TestCeleryBackend:
    def test_enqueue_uses_delay(self, mocker, sample_payload):
        mock_delay = mocker.patch('celery.app.task.Task.delay')

        CeleryBackend().enqueue_task(record_payload, sample_payload)

        mock_delay.assert_called_once_with(sample_payload)
        assert received == []

    def test_execute_sync(self, sample_payload):
        CeleryBackend().execute_task_sync(record_payload, sample_payload)
        assert received == [sample_payload]

    def test_execute_sync_reports_and_raises(self, mocker, sample_payload):
        backend = CeleryBackend()
        report_error = mocker.patch.object(backend, 'report_error')

        with pytest.raises(ValueError):
            backend.execute_task_sync(failing_listener, sample_payload)

        assert report_error.call_args[0][1]['action'] == 'execute_task_sync'


class TestDjangoQBackend:
    def test_enqueue_uses_async_task(self, mock_django_q, sample_payload):
        DjangoQBackend().enqueue_task(record_payload, sample_payload)

        mock_django_q.assert_called_once_with(
            'apps.event_hub.tests.test_backends.record_payload',
            sample_payload,
            group='event.record_payload'
        )

    def test_enqueue_failure_is_reported(self, mock_django_q, mocker, sample_payload):
        mock_django_q.side_effect = ConnectionError("broker unavailable")
        backend = DjangoQBackend()
        report_error = mocker.patch.object(backend, 'report_error')

        with pytest.raises(ConnectionError):
            backend.enqueue_task(record_payload, sample_payload)

        assert report_error.call_args[0][1]['action'] == 'enqueue_task'

    def test_execute_sync(self, sample_payload):
        DjangoQBackend().execute_task_sync(record_payload, sample_payload)
        assert received == [sample_payload]
