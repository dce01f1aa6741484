from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from apps.common.data_transfer_objects import FeeBreakdown, FeeConfig, PayoutMethod, ReconciliationReport


class PayoutFeeConfigServiceInterface(ABC):
    @abstractmethod
    def get_fee_config(self) -> FeeConfig:
        """Active fee configuration, defaults filled in for missing or malformed settings"""
        pass

    @abstractmethod
    def update_fee_setting(
        self,
        key: str,
        value: Any,
        user_id: Optional[Any] = None
    ) -> Tuple[bool, str]:
        """
        Validate and store a single payout fee setting

        Args:
            key: One of PAYOUT_FEE_KEYS
            value: New value; percentages in [0, 100], cents non-negative integers
            user_id: Acting staff user

        Returns:
            Tuple of (success: bool, message: str)
        """
        pass


class FeeReconciliationServiceInterface(ABC):
    @abstractmethod
    def reconcile(
        self,
        config: Optional[FeeConfig] = None,
        amounts: Optional[Iterable[int]] = None,
        methods: Optional[Sequence[PayoutMethod]] = None
    ) -> ReconciliationReport:
        """Compare local fee calculation with the database copy of the formula"""
        pass


class PayoutServiceInterface(ABC):
    @abstractmethod
    def apply_fees(self, payout, config: FeeConfig) -> FeeBreakdown:
        """Compute and store fee and net amounts on a payout"""
        pass

    @abstractmethod
    def list_payouts(
        self,
        status: str = "all",
        search: Optional[str] = None,
        limit: int = 100,
        offset: int = 0
    ) -> List[Dict]:
        """List payouts newest first"""
        pass

    @abstractmethod
    def get_stats(self, payouts: List[Dict]) -> Dict:
        """Counts by status and total net volume in cents"""
        pass

    @abstractmethod
    def retry_payout(self, payout_id: str) -> Tuple[bool, str]:
        """Reset a failed payout to pending"""
        pass
