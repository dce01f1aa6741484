from apps.common.data_transfer_objects import FeeConfig

PAYOUT_FEE_CATEGORY = "payout_fees"
PAYOUT_FEE_KEY_PREFIX = "payout_fee_"

# admin_config key for every FeeConfig field, e.g. payout_fee_paypal_cap_cents
PAYOUT_FEE_KEYS = {
    f"{PAYOUT_FEE_KEY_PREFIX}{field}": field for field in FeeConfig.model_fields
}

PAYOUT_FEE_DEFAULTS = {
    "payout_fee_stripe_fixed_cents": "25",
    "payout_fee_stripe_percentage": "0.25",
    "payout_fee_paypal_percentage": "2.0",
    "payout_fee_paypal_cap_cents": "2000",
    "payout_fee_venmo_percentage": "2.0",
    "payout_fee_venmo_cap_cents": "2000",
    "payout_fee_bank_ach_cents": "25",
}

PAYOUT_FEE_DESCRIPTIONS = {
    "payout_fee_stripe_fixed_cents": "Stripe Connect fixed fee per payout (cents)",
    "payout_fee_stripe_percentage": "Stripe Connect fee percentage",
    "payout_fee_paypal_percentage": "PayPal payout fee percentage",
    "payout_fee_paypal_cap_cents": "PayPal maximum fee per payout (cents)",
    "payout_fee_venmo_percentage": "Venmo payout fee percentage",
    "payout_fee_venmo_cap_cents": "Venmo maximum fee per payout (cents)",
    "payout_fee_bank_ach_cents": "Bank ACH flat fee per payout (cents)",
}

PERCENTAGE_SUFFIX = "_percentage"
CENTS_SUFFIX = "_cents"
