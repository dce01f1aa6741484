"""
Payout fee calculation.

Fees are charged by the payout provider and deducted from the seller's
gross payout. The platform itself takes no cut on payouts.

  stripe_connect  percentage + fixed
  paypal          percentage, capped
  venmo           percentage, capped
  bank_ach        flat

Every method is described by a FeeRule in FEE_SCHEDULE, naming the FeeConfig
fields that supply its percentage, fixed part and cap. The fee formula and
the human readable description are both derived from that schedule.

The database carries its own copy of this formula
(calculate_payout_fee_cents). Both must agree to the cent, which is why
percentages are applied with Decimal arithmetic and ROUND_HALF_UP, the same
rounding PostgreSQL uses for ROUND(numeric).

All functions here are pure: they take a FeeConfig snapshot, never raise,
and return 0 for unknown methods and non-positive amounts.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from apps.common.data_transfer_objects import FeeBreakdown, FeeConfig, PayoutMethod

DEFAULT_FEE_CONFIG = FeeConfig()

# Platform transaction fee on payouts is $0 per policy
PLATFORM_FEE_CENTS = 0

CURRENCY_SYMBOLS = {
    'USD': '$',
    'CAD': '$',
    'EUR': '€',
    'GBP': '£',
}


class FeeRule(BaseModel):
    """Names the FeeConfig fields a payout method's fee is built from."""
    model_config = ConfigDict(frozen=True)

    percentage_field: Optional[str] = None
    fixed_field: Optional[str] = None
    cap_field: Optional[str] = None


FEE_SCHEDULE: Dict[PayoutMethod, FeeRule] = {
    PayoutMethod.STRIPE_CONNECT: FeeRule(
        percentage_field='stripe_percentage',
        fixed_field='stripe_fixed_cents',
    ),
    PayoutMethod.PAYPAL: FeeRule(
        percentage_field='paypal_percentage',
        cap_field='paypal_cap_cents',
    ),
    PayoutMethod.VENMO: FeeRule(
        percentage_field='venmo_percentage',
        cap_field='venmo_cap_cents',
    ),
    PayoutMethod.BANK_ACH: FeeRule(
        fixed_field='bank_ach_cents',
    ),
}


def resolve_method(method: Union[PayoutMethod, str, None]) -> Optional[PayoutMethod]:
    try:
        return PayoutMethod(method)
    except (ValueError, TypeError):
        return None


def _positive_amount(amount_cents) -> Optional[Decimal]:
    if amount_cents is None or isinstance(amount_cents, bool):
        return None
    try:
        amount = Decimal(str(amount_cents))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount


def _percentage_of(amount: Decimal, percentage: float) -> int:
    fee = amount * Decimal(str(percentage)) / Decimal(100)
    return int(fee.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def compute_fee_cents(
    method: Union[PayoutMethod, str],
    gross_cents: int,
    config: FeeConfig = DEFAULT_FEE_CONFIG
) -> int:
    """
    Provider fee in cents for paying out gross_cents via method.

    Args:
        method: Payout method tag
        gross_cents: Gross payout amount in cents
        config: Fee configuration snapshot

    Returns:
        Fee in cents; 0 for non-positive amounts and unknown methods
    """
    amount = _positive_amount(gross_cents)
    if amount is None:
        return 0

    payout_method = resolve_method(method)
    if payout_method is None:
        return 0

    rule = FEE_SCHEDULE[payout_method]
    fee = 0
    if rule.percentage_field:
        fee += _percentage_of(amount, getattr(config, rule.percentage_field))
    if rule.fixed_field:
        fee += getattr(config, rule.fixed_field)
    if rule.cap_field:
        fee = min(fee, getattr(config, rule.cap_field))
    return fee


def compute_net_cents(
    gross_cents: int,
    platform_fee_cents: int,
    payout_fee_cents: int
) -> int:
    """Net payout after fees. Never negative; the platform absorbs any shortfall."""
    return max(0, gross_cents - platform_fee_cents - payout_fee_cents)


def format_currency(cents: int, currency: str = 'USD') -> str:
    amount = (Decimal(cents) / Decimal(100)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = '-' if amount < 0 else ''
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percentage(percentage: float) -> str:
    """0.25 -> '0.25', 2.0 -> '2', 12.50 -> '12.5'"""
    return format(Decimal(str(percentage)).normalize(), 'f')


def get_breakdown(
    method: Union[PayoutMethod, str],
    gross_cents: int,
    config: FeeConfig = DEFAULT_FEE_CONFIG
) -> FeeBreakdown:
    """Invalid and non-positive amounts are shown as a $0.00 gross with no fees"""
    amount = _positive_amount(gross_cents)
    gross_cents = int(amount) if amount is not None else 0

    payout_fee_cents = compute_fee_cents(method, gross_cents, config)
    platform_fee_cents = PLATFORM_FEE_CENTS
    net_cents = compute_net_cents(gross_cents, platform_fee_cents, payout_fee_cents)

    return FeeBreakdown(
        gross_cents=gross_cents,
        platform_fee_cents=platform_fee_cents,
        payout_fee_cents=payout_fee_cents,
        net_cents=net_cents,
        gross_formatted=format_currency(gross_cents),
        platform_fee_formatted=format_currency(platform_fee_cents),
        payout_fee_formatted=format_currency(payout_fee_cents),
        net_formatted=format_currency(net_cents),
    )


def describe_fee(
    method: Union[PayoutMethod, str],
    config: FeeConfig = DEFAULT_FEE_CONFIG
) -> str:
    """
    Short fee policy text for a payout method, e.g. '2% (max $20.00)'.

    Built from the same FeeRule as compute_fee_cents so the text cannot
    drift from the formula.
    """
    payout_method = resolve_method(method)
    if payout_method is None:
        return 'Unknown method'

    rule = FEE_SCHEDULE[payout_method]
    description = ''
    if rule.percentage_field:
        description = f"{format_percentage(getattr(config, rule.percentage_field))}%"
    if rule.fixed_field:
        fixed = format_currency(getattr(config, rule.fixed_field))
        description = f"{description} + {fixed}" if description else fixed
    if rule.cap_field:
        description = f"{description} (max {format_currency(getattr(config, rule.cap_field))})"
    return description
