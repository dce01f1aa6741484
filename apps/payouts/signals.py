import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from apps.admin_config.models import AdminConfig

from .constants import PAYOUT_FEE_KEYS
from .services.fee_config_service import PayoutFeeConfigService

logger = logging.getLogger(__name__)


@receiver(post_save, sender=AdminConfig)
@receiver(post_delete, sender=AdminConfig)
def invalidate_fee_config_cache(sender, instance, **kwargs):
    # Covers writes made outside PayoutFeeConfigService, e.g. the Django admin
    if instance.key in PAYOUT_FEE_KEYS:
        PayoutFeeConfigService.invalidate_cache()
        logger.debug(f"Payout fee config cache cleared after change to {instance.key}")
