import logging
from typing import Iterable, Optional, Sequence

from django.db import DatabaseError

from apps.common.data_transfer_objects import (
    FeeConfig,
    FeeMismatch,
    NetMismatch,
    PayoutMethod,
    ReconciliationReport,
)

from ..fees import PLATFORM_FEE_CENTS, compute_fee_cents, compute_net_cents
from ..interfaces import FeeReconciliationServiceInterface
from ..repositories import DatabaseMirroredFeeRepository, MirroredFeeRepository
from .fee_config_service import PayoutFeeConfigService

logger = logging.getLogger(__name__)

# Non-positive amounts, sub-dollar amounts, half-cent ties at the default
# percentages, and amounts on both sides of the PayPal/Venmo caps
DEFAULT_RECONCILIATION_AMOUNTS = (
    -100,
    0,
    1,
    25,
    199,
    200,
    201,
    1000,
    5000,
    10000,
    12345,
    99999,
    100000,
    100025,
    200000,
    1000000,
    10000000,
)


class FeeReconciliationService(FeeReconciliationServiceInterface):
    """
    Runs (method, amount) pairs through compute_fee_cents and compute_net_cents
    and through the database's calculate_payout_fee_cents and
    compute_net_payout_cents, and reports every disagreement.
    """

    def __init__(
        self,
        mirror: Optional[MirroredFeeRepository] = None,
        config_service: Optional[PayoutFeeConfigService] = None
    ):
        self.mirror = mirror or DatabaseMirroredFeeRepository()
        self.config_service = config_service or PayoutFeeConfigService(mirror=self.mirror)

    def reconcile(
        self,
        config: Optional[FeeConfig] = None,
        amounts: Optional[Iterable[int]] = None,
        methods: Optional[Sequence[PayoutMethod]] = None
    ) -> ReconciliationReport:
        config = config or self.config_service.get_fee_config()
        amounts = list(DEFAULT_RECONCILIATION_AMOUNTS if amounts is None else amounts)
        methods = list(methods or PayoutMethod)

        report = ReconciliationReport(config=config)
        for method in methods:
            for gross_cents in amounts:
                expected = compute_fee_cents(method, gross_cents, config)
                # Both sides compute net from the locally computed fee
                expected_net = compute_net_cents(gross_cents, PLATFORM_FEE_CENTS, expected)
                try:
                    mirrored = self.mirror.calculate_fee_cents(method.value, gross_cents)
                    mirrored_net = self.mirror.compute_net_cents(gross_cents, PLATFORM_FEE_CENTS, expected)
                except (DatabaseError, TypeError, ValueError) as e:
                    logger.error(f"Mirrored fee calculation failed for {method.value}/{gross_cents}: {str(e)}")
                    report.mirror_error = str(e)
                    return report

                report.checked += 1
                if mirrored != expected:
                    report.mismatches.append(FeeMismatch(
                        method=method,
                        gross_cents=gross_cents,
                        expected_cents=expected,
                        mirrored_cents=mirrored,
                    ))
                if mirrored_net != expected_net:
                    report.net_mismatches.append(NetMismatch(
                        gross_cents=gross_cents,
                        platform_fee_cents=PLATFORM_FEE_CENTS,
                        payout_fee_cents=expected,
                        expected_cents=expected_net,
                        mirrored_cents=mirrored_net,
                    ))

        if report.mismatches or report.net_mismatches:
            logger.error(
                f"Payout fee drift: {len(report.mismatches)} fee and {len(report.net_mismatches)} net "
                f"results of {report.checked} checks disagree with the database calculation"
            )
        else:
            logger.info(f"Payout fee reconciliation passed ({report.checked} checks)")
        return report
