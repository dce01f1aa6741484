from django.db import models

from apps.common.data_transfer_objects import PayoutMethod
from apps.common.fields import Base58UUIDv5Field
from apps.common.mixins import TimeStampMixin

PAYOUT_METHOD_CHOICES = [(method.value, method.label) for method in PayoutMethod]


class Payout(TimeStampMixin):
    """A seller payout with the amounts settled for it, all in cents."""
    class PayoutStatus(models.TextChoices):
        PENDING = "pending", "Pending"
        PROCESSING = "processing", "Processing"
        COMPLETED = "completed", "Completed"
        FAILED = "failed", "Failed"

    id = Base58UUIDv5Field(primary_key=True)
    seller_id = models.CharField(max_length=64, db_index=True)
    seller_email = models.EmailField(null=True, blank=True)
    trade_id = models.CharField(max_length=64, null=True, blank=True)
    method = models.CharField(max_length=20, choices=PAYOUT_METHOD_CHOICES)
    status = models.CharField(
        max_length=20,
        choices=PayoutStatus.choices,
        default=PayoutStatus.PENDING,
        db_index=True
    )
    gross_amount_cents = models.PositiveIntegerField()
    platform_fee_cents = models.PositiveIntegerField(default=0)
    payout_fee_cents = models.PositiveIntegerField(default=0)
    net_amount_cents = models.PositiveIntegerField(default=0)
    failure_reason = models.TextField(null=True, blank=True)
    retry_count = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "seller_payouts"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Payout {self.id} to {self.seller_email or self.seller_id} ({self.status})"
