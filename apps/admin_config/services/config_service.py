import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from django.contrib.auth import get_user_model
from django.db import transaction

from apps.security.services.audit_service import AuditService

from ..interfaces import AdminConfigServiceInterface
from ..models import AdminConfig

logger = logging.getLogger(__name__)

class AdminConfigService(AdminConfigServiceInterface):
    RESOURCE_TYPE = "admin_config"

    def __init__(self, audit_service: Optional[AuditService] = None):
        self.audit_service = audit_service or AuditService()

    @staticmethod
    def _serialize(item: AdminConfig) -> Dict:
        return {
            'key': item.key,
            'value': item.value,
            'description': item.description,
            'category': item.category,
            'updated_by': item.updated_by_id,
            'created_at': item.created_at.isoformat() if item.created_at else None,
            'updated_at': item.updated_at.isoformat() if item.updated_at else None,
        }

    def list_config(
        self,
        keys: Optional[Iterable[str]] = None,
        category: Optional[str] = None
    ) -> List[Dict]:
        queryset = AdminConfig.objects.all()
        if keys is not None:
            queryset = queryset.filter(key__in=list(keys))
        if category:
            queryset = queryset.filter(category=category)
        return [self._serialize(item) for item in queryset.order_by('key')]

    def get_item(self, key: str) -> Optional[Dict]:
        item = AdminConfig.objects.filter(key=key).first()
        return self._serialize(item) if item else None

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = AdminConfig.objects.filter(key=key).values_list('value', flat=True).first()
        return default if value is None else value

    def get_values(self, keys: Iterable[str]) -> Dict[str, str]:
        return dict(
            AdminConfig.objects.filter(key__in=list(keys)).values_list('key', 'value')
        )

    def set_value(
        self,
        key: str,
        value: str,
        user_id: Optional[Any] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        create: bool = True
    ) -> Tuple[bool, str]:
        try:
            user = None
            if user_id:
                user = get_user_model().objects.filter(pk=user_id).first()

            with transaction.atomic():
                item = AdminConfig.objects.select_for_update().filter(key=key).first()
                if item is None and not create:
                    return False, f"Config key not found: {key}"

                old_value = item.value if item else None
                if item is None:
                    item = AdminConfig(key=key)

                item.value = str(value)
                item.updated_by = user
                if description is not None:
                    item.description = description
                if category is not None:
                    item.category = category
                item.save()

            logger.info(f"Admin config {key} changed from {old_value!r} to {item.value!r}")
            self._audit(user_id, 'UPDATE' if old_value is not None else 'CREATE', key, old_value, item.value)

            action = "created" if old_value is None else "updated"
            return True, f"Config {key} {action} successfully"

        except Exception as e:
            logger.error(f"Error updating admin config {key}: {str(e)}")
            return False, f"Failed to update config {key}"

    def _audit(self, user_id, action: str, key: str, old_value: Optional[str], new_value: str) -> None:
        # Audit failures never undo a config write
        try:
            success, message = self.audit_service.log_event(
                user_id=user_id,
                action=action,
                resource_type=self.RESOURCE_TYPE,
                resource_id=key,
                details={'key': key, 'old_value': old_value, 'new_value': new_value}
            )
            if not success:
                logger.warning(f"Audit log for config {key} not written: {message}")
        except Exception as e:
            logger.warning(f"Audit log for config {key} failed: {str(e)}")
