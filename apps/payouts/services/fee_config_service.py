import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple
from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError
from pydantic import ValidationError as SchemaValidationError

from apps.admin_config.services.config_service import AdminConfigService
from apps.common.data_transfer_objects import FeeConfig
from apps.event_hub.services.factory import get_event_bus

from ..constants import (
    PAYOUT_FEE_CATEGORY,
    PAYOUT_FEE_DEFAULTS,
    PAYOUT_FEE_DESCRIPTIONS,
    PAYOUT_FEE_KEYS,
    PERCENTAGE_SUFFIX,
)
from ..forms import PayoutFeeSettingForm, first_form_error
from ..interfaces import PayoutFeeConfigServiceInterface
from ..repositories import DatabaseMirroredFeeRepository, MirroredFeeRepository

logger = logging.getLogger(__name__)

FEE_CONFIG_CACHE_KEY = "payout_fee_config"

# Writes replace this token, so snapshots read before a write are never served after it
FEE_CONFIG_VERSION_KEY = "payout_fee_config_version"

FEE_CONFIG_UPDATED_EVENT = "payout_fee_config_updated"


def parse_fee_settings(raw_values: Dict[str, str]) -> FeeConfig:
    """
    Build a FeeConfig from admin_config strings.

    Each field falls back to its default when the key is missing or its
    value does not parse to a valid number.
    """
    defaults = FeeConfig()
    values = {}
    for key, field in PAYOUT_FEE_KEYS.items():
        raw = raw_values.get(key)
        if raw is None:
            continue
        try:
            if key.endswith(PERCENTAGE_SUFFIX):
                number = float(raw)
            else:
                number = int(str(raw).strip())
            # Validates the single field (e.g. rejects negatives and NaN)
            FeeConfig(**{field: number})
        except (TypeError, ValueError, SchemaValidationError):
            logger.warning(
                f"Invalid payout fee setting {key}={raw!r}, using default {getattr(defaults, field)}"
            )
            continue
        values[field] = number
    return FeeConfig(**values)


class PayoutFeeConfigService(PayoutFeeConfigServiceInterface):
    def __init__(
        self,
        config_service: Optional[AdminConfigService] = None,
        mirror: Optional[MirroredFeeRepository] = None
    ):
        self.config_service = config_service or AdminConfigService()
        self.mirror = mirror or DatabaseMirroredFeeRepository()

    def get_fee_config(self) -> FeeConfig:
        cache_key = self.current_cache_key()
        cached = cache.get(cache_key)
        if cached is not None:
            return FeeConfig(**cached)

        try:
            raw_values = self.config_service.get_values(PAYOUT_FEE_KEYS)
        except DatabaseError as e:
            logger.error(f"Error reading payout fee config, using defaults: {str(e)}")
            return FeeConfig()

        config = parse_fee_settings(raw_values)
        cache.set(
            cache_key,
            config.model_dump(),
            getattr(settings, 'PAYOUT_FEE_CONFIG_CACHE_SECONDS', 300)
        )
        return config

    def get_fee_settings(self) -> List[Dict]:
        return self.config_service.list_config(keys=PAYOUT_FEE_KEYS)

    def get_mirrored_fee_config(self) -> Optional[FeeConfig]:
        """Fee config as the database functions see it, None if unavailable"""
        try:
            return self.mirror.get_fee_config()
        except (DatabaseError, SchemaValidationError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error fetching payout fee config via database function: {str(e)}")
            return None

    def update_fee_setting(
        self,
        key: str,
        value: Any,
        user_id: Optional[Any] = None
    ) -> Tuple[bool, str]:
        form = PayoutFeeSettingForm(data={'key': key, 'value': '' if value is None else str(value)})
        if not form.is_valid():
            return False, first_form_error(form)

        key = form.cleaned_data['key']
        success, message = self.config_service.set_value(
            key,
            form.cleaned_data['value'],
            user_id=user_id,
            category=PAYOUT_FEE_CATEGORY
        )
        if not success:
            return False, message

        self.invalidate_cache()
        self._notify_updated(key, form.cleaned_data['value'], user_id)
        return True, message

    def seed_defaults(self) -> int:
        """Create any missing payout fee keys with their default values"""
        existing = self.config_service.get_values(PAYOUT_FEE_KEYS)
        created = 0
        for key, value in PAYOUT_FEE_DEFAULTS.items():
            if key in existing:
                continue
            success, message = self.config_service.set_value(
                key,
                value,
                description=PAYOUT_FEE_DESCRIPTIONS[key],
                category=PAYOUT_FEE_CATEGORY
            )
            if not success:
                logger.error(f"Could not seed payout fee setting {key}: {message}")
                continue
            created += 1
        if created:
            self.invalidate_cache()
        return created

    @staticmethod
    def current_cache_key() -> str:
        version = cache.get(FEE_CONFIG_VERSION_KEY)
        if version is None:
            cache.add(FEE_CONFIG_VERSION_KEY, uuid.uuid4().hex, None)
            version = cache.get(FEE_CONFIG_VERSION_KEY)
        return f"{FEE_CONFIG_CACHE_KEY}:{version}"

    @staticmethod
    def invalidate_cache() -> None:
        cache.set(FEE_CONFIG_VERSION_KEY, uuid.uuid4().hex, None)

    def _notify_updated(self, key: str, value: str, user_id: Optional[Any]) -> None:
        try:
            get_event_bus().emit_event(FEE_CONFIG_UPDATED_EVENT, {
                'key': key,
                'value': value,
                'user_id': user_id,
            })
        except Exception as e:
            logger.error(f"Error emitting {FEE_CONFIG_UPDATED_EVENT}: {str(e)}")
