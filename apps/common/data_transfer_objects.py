from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from enum import Enum


class PayoutMethod(str, Enum):
    STRIPE_CONNECT = "stripe_connect"
    PAYPAL = "paypal"
    VENMO = "venmo"
    BANK_ACH = "bank_ach"

    @property
    def label(self) -> str:
        return {
            PayoutMethod.STRIPE_CONNECT: "Stripe Connect",
            PayoutMethod.PAYPAL: "PayPal",
            PayoutMethod.VENMO: "Venmo",
            PayoutMethod.BANK_ACH: "Bank (ACH)",
        }[self]


class FeeConfig(BaseModel):
    """
    Snapshot of the payout fee settings.

    Percentages are plain percent values (0.25 means 0.25%). The upper bound
    of 100 is checked where settings are written, not here.
    """
    model_config = ConfigDict(frozen=True)

    stripe_fixed_cents: int = Field(25, ge=0)
    stripe_percentage: float = Field(0.25, ge=0, allow_inf_nan=False)
    paypal_percentage: float = Field(2.0, ge=0, allow_inf_nan=False)
    paypal_cap_cents: int = Field(2000, ge=0)
    venmo_percentage: float = Field(2.0, ge=0, allow_inf_nan=False)
    venmo_cap_cents: int = Field(2000, ge=0)
    bank_ach_cents: int = Field(25, ge=0)


class FeeBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_cents: int
    platform_fee_cents: int
    payout_fee_cents: int
    net_cents: int
    gross_formatted: str
    platform_fee_formatted: str
    payout_fee_formatted: str
    net_formatted: str


class FeeMismatch(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    method: PayoutMethod
    gross_cents: int
    expected_cents: int
    mirrored_cents: int


class NetMismatch(BaseModel):
    gross_cents: int
    platform_fee_cents: int
    payout_fee_cents: int
    expected_cents: int
    mirrored_cents: int


class ReconciliationReport(BaseModel):
    config: FeeConfig
    checked: int = 0
    mismatches: List[FeeMismatch] = Field(default_factory=list)
    net_mismatches: List[NetMismatch] = Field(default_factory=list)
    mirror_error: Optional[str] = None

    @property
    def is_consistent(self) -> bool:
        return self.mirror_error is None and not self.mismatches and not self.net_mismatches

    def as_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data['is_consistent'] = self.is_consistent
        return data
