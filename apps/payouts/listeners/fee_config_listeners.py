import logging
from typing import Dict

from apps.event_hub.services.factory import get_event_bus
from apps.payouts.services.fee_config_service import FEE_CONFIG_UPDATED_EVENT
from apps.payouts.services.reconciliation_service import FeeReconciliationService

logger = logging.getLogger(__name__)

event_bus = get_event_bus()

FEE_DRIFT_DETECTED_EVENT = "payout_fee_drift_detected"


def reconcile_on_fee_config_change(payload: Dict) -> bool:
    """Compare both fee calculations after a payout fee setting is written"""
    logger.info(f"Reconciling payout fees after change to {payload.get('key')}")

    report = FeeReconciliationService().reconcile()
    if report.mirror_error:
        logger.error(f"Payout fee reconciliation could not reach the database: {report.mirror_error}")
        return False

    if report.is_consistent:
        return True

    event_bus.emit_event(FEE_DRIFT_DETECTED_EVENT, {
        'trigger': payload,
        'checked': report.checked,
        'mismatches': [mismatch.model_dump(mode="json") for mismatch in report.mismatches],
        'net_mismatches': [mismatch.model_dump(mode="json") for mismatch in report.net_mismatches],
    })
    return False


event_bus.register_listener(FEE_CONFIG_UPDATED_EVENT, reconcile_on_fee_config_change)
logger.info(f"Registered {FEE_CONFIG_UPDATED_EVENT} listener")
