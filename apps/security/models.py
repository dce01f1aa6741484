from django.db import models
from django.conf import settings

from apps.common.mixins import TimeStampMixin
from apps.common.fields import Base58UUIDv5Field


class AuditEvent(TimeStampMixin):
    """Audit trail for staff changes"""
    ACTION_CHOICES = (
        ('CREATE', 'Create'),
        ('UPDATE', 'Update'),
        ('DELETE', 'Delete'),
    )

    id = Base58UUIDv5Field(primary_key=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )
    action = models.CharField(max_length=6, choices=ACTION_CHOICES)
    resource_type = models.CharField(max_length=64)
    resource_id = models.CharField(max_length=255, null=True, blank=True)
    details = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "audit_logs"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["resource_type", "resource_id"], name="audit_logs_resource_idx"),
        ]

    def __str__(self):
        return f"{self.action} on {self.resource_type}:{self.resource_id} by {self.user or 'system'}"
