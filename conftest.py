import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def mock_django_q(mocker):
    # Listeners are enqueued, never run, unless a test calls them directly
    return mocker.patch('apps.event_hub.services.backends.django_q.async_task', return_value='task-id')


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username='support', password='password', email='support@example.com', is_staff=True
    )


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client


@pytest.fixture
def seller_client(client, django_user_model):
    user = django_user_model.objects.create_user(username='seller', password='password')
    client.force_login(user)
    return client
