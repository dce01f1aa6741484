import logging
from typing import Any, Dict, List, Optional, Tuple
from django.contrib.auth import get_user_model
from django.db import transaction

from ..interfaces import AuditServiceInterface
from ..models import AuditEvent

logger = logging.getLogger(__name__)

class AuditService(AuditServiceInterface):
    @transaction.atomic
    def log_event(
        self,
        user_id: Optional[Any],
        action: str,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict] = None
    ) -> Tuple[bool, str]:
        try:
            # Validate action
            if action not in dict(AuditEvent.ACTION_CHOICES):
                return False, f"Invalid action: {action}"

            user = None
            if user_id:
                User = get_user_model()
                try:
                    user = User.objects.get(pk=user_id)
                except User.DoesNotExist:
                    return False, f"Invalid user_id: {user_id}"

            AuditEvent.objects.create(
                user=user,
                action=action,
                resource_type=resource_type,
                resource_id=resource_id,
                details=details or {}
            )

            return True, "Audit event logged successfully"

        except Exception as e:
            logger.error(f"Error logging audit event: {str(e)}")
            return False, "Failed to log audit event"

    def get_audit_trail(
        self,
        resource_type: str,
        resource_id: str
    ) -> List[Dict]:
        try:
            audit_events = AuditEvent.objects.filter(
                resource_type=resource_type,
                resource_id=resource_id
            ).select_related('user').order_by('-created_at')

            return [{
                'id': event.id,
                'user': event.user.get_username() if event.user else 'system',
                'action': event.action,
                'timestamp': event.created_at,
                'details': event.details
            } for event in audit_events]

        except Exception as e:
            logger.error(f"Error retrieving audit trail: {str(e)}")
            return []
