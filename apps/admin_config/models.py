from django.db import models
from django.conf import settings

from apps.common.mixins import TimeStampMixin


class AdminConfig(TimeStampMixin):
    """
    Staff-editable setting. Values are stored as strings and parsed by the
    code that owns the key (see apps.payouts.services.fee_config_service).
    """
    key = models.CharField(max_length=100, primary_key=True)
    value = models.TextField()
    description = models.TextField(null=True, blank=True)
    category = models.CharField(max_length=50, default="general", db_index=True)
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+"
    )

    class Meta:
        db_table = "admin_config"
        ordering = ["key"]
        verbose_name = "admin config item"

    def __str__(self):
        return f"{self.key}={self.value}"
