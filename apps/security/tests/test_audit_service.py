import pytest

from apps.security.models import AuditEvent
from apps.security.services.audit_service import AuditService


@pytest.fixture
def audit_service():
    return AuditService()


@pytest.mark.django_db
class TestAuditService:
    def test_log_event(self, audit_service, staff_user):
        success, message = audit_service.log_event(
            user_id=staff_user.pk,
            action='UPDATE',
            resource_type='admin_config',
            resource_id='payout_fee_paypal_cap_cents',
            details={'old_value': '2000', 'new_value': '2500'}
        )

        assert success
        event = AuditEvent.objects.get()
        assert event.user == staff_user
        assert event.details == {'old_value': '2000', 'new_value': '2500'}

    def test_system_event_has_no_user(self, audit_service):
        success, _ = audit_service.log_event(None, 'CREATE', 'admin_config', 'support_email')

        assert success
        event = AuditEvent.objects.get()
        assert event.user is None
        assert event.details == {}

    def test_invalid_action(self, audit_service):
        success, message = audit_service.log_event(None, 'PURGE', 'admin_config', 'support_email')

        assert not success
        assert message == "Invalid action: PURGE"
        assert not AuditEvent.objects.exists()

    def test_invalid_user(self, audit_service):
        success, message = audit_service.log_event(999999, 'UPDATE', 'admin_config', 'support_email')

        assert not success
        assert message == "Invalid user_id: 999999"

    def test_audit_trail(self, audit_service, staff_user):
        audit_service.log_event(staff_user.pk, 'CREATE', 'admin_config', 'support_email')
        audit_service.log_event(None, 'UPDATE', 'admin_config', 'support_email')
        audit_service.log_event(None, 'UPDATE', 'admin_config', 'other_key')

        trail = audit_service.get_audit_trail('admin_config', 'support_email')

        assert len(trail) == 2
        assert {entry['user'] for entry in trail} == {'support', 'system'}
