import json

import pytest
from django.urls import reverse

from apps.admin_config.models import AdminConfig
from apps.payouts.services.fee_config_service import PayoutFeeConfigService


def patch_json(client, data):
    return client.patch(reverse('admin_config:admin_config'), data=json.dumps(data), content_type='application/json')


@pytest.fixture
def site_setting(db):
    return AdminConfig.objects.create(key='support_email', value='help@example.com')


@pytest.mark.django_db
class TestAdminConfigViews:
    def test_list(self, admin_client, site_setting):
        response = admin_client.get(reverse('admin_config:admin_config'))

        assert response.status_code == 200
        keys = [row['key'] for row in response.json()['data']]
        assert 'support_email' in keys
        assert 'payout_fee_paypal_cap_cents' in keys

    def test_list_by_category(self, admin_client, site_setting):
        response = admin_client.get(reverse('admin_config:admin_config'), {'category': 'general'})

        assert [row['key'] for row in response.json()['data']] == ['support_email']

    def test_anonymous_is_rejected(self, client):
        assert client.get(reverse('admin_config:admin_config')).status_code == 401

    def test_update(self, admin_client, site_setting):
        response = patch_json(admin_client, {'key': 'support_email', 'value': 'ops@example.com'})

        assert response.status_code == 200
        assert response.json()['data']['value'] == 'ops@example.com'

    def test_update_missing_key(self, admin_client):
        response = patch_json(admin_client, {'key': 'missing', 'value': 'x'})

        assert response.status_code == 404
        assert not AdminConfig.objects.filter(key='missing').exists()

    def test_payout_fee_keys_are_validated(self, admin_client):
        response = patch_json(admin_client, {'key': 'payout_fee_venmo_percentage', 'value': '250'})

        assert response.status_code == 400
        assert response.json()['error'] == "value: Percentage must be between 0 and 100"

    def test_payout_fee_update_reaches_calculator(self, admin_client):
        response = patch_json(admin_client, {'key': 'payout_fee_venmo_percentage', 'value': '1.5'})

        assert response.status_code == 200
        assert PayoutFeeConfigService().get_fee_config().venmo_percentage == 1.5

    def test_requires_change_permission(self, staff_client, site_setting):
        response = patch_json(staff_client, {'key': 'support_email', 'value': 'ops@example.com'})

        assert response.status_code == 403

    def test_invalid_body(self, admin_client):
        response = admin_client.patch(
            reverse('admin_config:admin_config'), data='[1, 2]', content_type='application/json'
        )
        assert response.status_code == 400
