import logging
from typing import Dict, List, Optional, Tuple
from django.db import transaction
from django.db.models import F, Q

from apps.common.data_transfer_objects import FeeBreakdown, FeeConfig

from ..fees import get_breakdown
from ..interfaces import PayoutServiceInterface
from ..models import Payout

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 500

PAYOUT_NOT_FOUND = "Payout not found"


class PayoutService(PayoutServiceInterface):
    @staticmethod
    def _serialize(payout: Payout) -> Dict:
        return {
            'id': payout.id,
            'seller_id': payout.seller_id,
            'seller_email': payout.seller_email,
            'trade_id': payout.trade_id,
            'method': payout.method,
            'status': payout.status,
            'gross_amount_cents': payout.gross_amount_cents,
            'platform_fee_cents': payout.platform_fee_cents,
            'payout_fee_cents': payout.payout_fee_cents,
            'net_amount_cents': payout.net_amount_cents,
            'failure_reason': payout.failure_reason,
            'retry_count': payout.retry_count,
            'created_at': payout.created_at.isoformat() if payout.created_at else None,
            'updated_at': payout.updated_at.isoformat() if payout.updated_at else None,
        }

    def apply_fees(self, payout: Payout, config: FeeConfig) -> FeeBreakdown:
        """Store the settlement amounts for a payout, computed from a config snapshot"""
        breakdown = get_breakdown(payout.method, payout.gross_amount_cents, config)
        payout.platform_fee_cents = breakdown.platform_fee_cents
        payout.payout_fee_cents = breakdown.payout_fee_cents
        payout.net_amount_cents = breakdown.net_cents
        payout.save(update_fields=[
            'platform_fee_cents', 'payout_fee_cents', 'net_amount_cents', 'updated_at'
        ])
        return breakdown

    def list_payouts(
        self,
        status: str = "all",
        search: Optional[str] = None,
        limit: int = 100,
        offset: int = 0
    ) -> List[Dict]:
        queryset = Payout.objects.all()
        if status and status != "all":
            queryset = queryset.filter(status=status)
        if search:
            queryset = queryset.filter(
                Q(seller_email__icontains=search)
                | Q(seller_id__iexact=search)
                | Q(trade_id__iexact=search)
                | Q(id=search)
            )

        limit = max(1, min(limit, MAX_PAGE_SIZE))
        offset = max(0, offset)
        payouts = queryset.order_by('-created_at')[offset:offset + limit]
        return [self._serialize(payout) for payout in payouts]

    def get_stats(self, payouts: List[Dict]) -> Dict:
        statuses = [payout['status'] for payout in payouts]
        return {
            'total_count': len(payouts),
            'total_completed': statuses.count(Payout.PayoutStatus.COMPLETED),
            'total_pending': sum(
                1 for status in statuses
                if status in (Payout.PayoutStatus.PENDING, Payout.PayoutStatus.PROCESSING)
            ),
            'total_failed': statuses.count(Payout.PayoutStatus.FAILED),
            'total_volume_cents': sum(payout['net_amount_cents'] or 0 for payout in payouts),
        }

    def retry_payout(self, payout_id: str) -> Tuple[bool, str]:
        try:
            with transaction.atomic():
                payout = Payout.objects.select_for_update().get(id=payout_id)

                if payout.status != Payout.PayoutStatus.FAILED:
                    return False, "Only failed payouts can be retried"

                payout.status = Payout.PayoutStatus.PENDING
                payout.failure_reason = None
                payout.retry_count = F('retry_count') + 1
                payout.save(update_fields=['status', 'failure_reason', 'retry_count', 'updated_at'])

            logger.info(f"Payout {payout_id} reset to pending for retry")
            return True, "Payout reset to pending for retry"

        except Payout.DoesNotExist:
            return False, PAYOUT_NOT_FOUND
        except Exception as e:
            logger.error(f"Error retrying payout {payout_id}: {str(e)}")
            return False, f"Error retrying payout: {str(e)}"
