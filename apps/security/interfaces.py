from abc import ABC, abstractmethod
from typing import Tuple, Dict, Optional, List, Any


class AuditServiceInterface(ABC):
    @abstractmethod
    def log_event(
        self,
        user_id: Optional[Any],
        action: str,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict] = None
    ) -> Tuple[bool, str]:
        """
        Record a change made by a staff user

        Args:
            user_id: Primary key of the acting user, None for system changes
            action: One of AuditEvent.ACTION_CHOICES
            resource_type: Kind of record changed (e.g. "admin_config")
            resource_id: Identifier of the changed record
            details: Free-form change details (old/new values)

        Returns:
            Tuple of (success: bool, message: str)
        """
        pass

    @abstractmethod
    def get_audit_trail(
        self,
        resource_type: str,
        resource_id: str
    ) -> List[Dict]:
        """Get audit events for a record, newest first"""
        pass
