import pytest

from apps.common.data_transfer_objects import FeeConfig, PayoutMethod
from apps.payouts.fees import (
    FEE_SCHEDULE,
    compute_fee_cents,
    compute_net_cents,
    describe_fee,
    format_currency,
    format_percentage,
    get_breakdown,
)

ALL_METHODS = [method.value for method in PayoutMethod]


@pytest.fixture
def default_config():
    return FeeConfig()


@pytest.mark.parametrize("method", ALL_METHODS)
@pytest.mark.parametrize("gross_cents", [0, -1, -10000])
def test_non_positive_amount_has_no_fee(method, gross_cents, default_config):
    assert compute_fee_cents(method, gross_cents, default_config) == 0


@pytest.mark.parametrize("method,gross_cents,expected", [
    ("stripe_connect", 10000, 50),
    ("stripe_connect", 100000, 275),
    ("paypal", 5000, 100),
    ("paypal", 200000, 2000),
    ("venmo", 200000, 2000),
    ("bank_ach", 10000, 25),
    ("bank_ach", 100000, 25),
])
def test_default_fees(method, gross_cents, expected, default_config):
    assert compute_fee_cents(method, gross_cents, default_config) == expected


def test_default_config_is_used_when_omitted():
    assert compute_fee_cents("stripe_connect", 10000) == 50


def test_accepts_enum_members(default_config):
    assert compute_fee_cents(PayoutMethod.PAYPAL, 5000, default_config) == 100


def test_half_cent_rounds_up(default_config):
    # 0.25% of 200 cents is exactly half a cent
    assert compute_fee_cents("stripe_connect", 199, default_config) == 25
    assert compute_fee_cents("stripe_connect", 200, default_config) == 26
    assert compute_fee_cents("stripe_connect", 201, default_config) == 26
    # 2% of 25 cents is exactly half a cent
    assert compute_fee_cents("paypal", 25, default_config) == 1
    assert compute_fee_cents("paypal", 1, default_config) == 0


def test_cap_applies_after_rounding(default_config):
    assert compute_fee_cents("paypal", 100000, default_config) == 2000
    assert compute_fee_cents("paypal", 100025, default_config) == 2000
    assert compute_fee_cents("venmo", 99999, default_config) == 2000


@pytest.mark.parametrize("method", ["wire", "", None, "PAYPAL", 42])
def test_unknown_method_has_no_fee(method, default_config):
    assert compute_fee_cents(method, 10000, default_config) == 0


@pytest.mark.parametrize("gross_cents", [None, "abc", float("nan"), float("inf"), True])
def test_invalid_amount_has_no_fee(gross_cents, default_config):
    assert compute_fee_cents("paypal", gross_cents, default_config) == 0


@pytest.mark.parametrize("gross_cents", [None, "abc", float("nan"), float("inf"), True, 0, -500])
def test_breakdown_for_invalid_amount_is_zero(gross_cents, default_config):
    breakdown = get_breakdown("paypal", gross_cents, default_config)

    assert breakdown.gross_cents == 0
    assert breakdown.payout_fee_cents == 0
    assert breakdown.net_cents == 0
    assert breakdown.gross_formatted == "$0.00"
    assert breakdown.net_formatted == "$0.00"


def test_breakdown_accepts_numeric_strings(default_config):
    breakdown = get_breakdown("stripe_connect", "10000", default_config)

    assert breakdown.gross_cents == 10000
    assert breakdown.net_cents == 9950


def test_custom_config_overrides_defaults():
    custom = FeeConfig(stripe_percentage=0.5, stripe_fixed_cents=50)
    assert compute_fee_cents("stripe_connect", 10000, custom) == 100


def test_custom_caps_and_flat_fees():
    custom = FeeConfig(
        paypal_percentage=3.5,
        paypal_cap_cents=1500,
        venmo_percentage=0,
        bank_ach_cents=0,
    )
    assert compute_fee_cents("paypal", 10000, custom) == 350
    assert compute_fee_cents("paypal", 1000000, custom) == 1500
    assert compute_fee_cents("venmo", 1000000, custom) == 0
    assert compute_fee_cents("bank_ach", 1000000, custom) == 0


@pytest.mark.parametrize("method", ALL_METHODS)
def test_fee_is_non_decreasing_in_amount(method, default_config):
    previous = 0
    for gross_cents in range(0, 300000, 37):
        fee = compute_fee_cents(method, gross_cents, default_config)
        assert fee >= previous
        previous = fee


@pytest.mark.parametrize("method,cap_field", [
    ("paypal", "paypal_cap_cents"),
    ("venmo", "venmo_cap_cents"),
])
def test_capped_methods_never_exceed_cap(method, cap_field, default_config):
    cap = getattr(default_config, cap_field)
    for gross_cents in [1, 999, 99999, 100000, 100001, 10 ** 7, 10 ** 12]:
        assert compute_fee_cents(method, gross_cents, default_config) <= cap
    assert compute_fee_cents(method, 10 ** 12, default_config) == cap


@pytest.mark.parametrize("method", ALL_METHODS)
def test_fee_is_stable_across_calls(method, default_config):
    first = compute_fee_cents(method, 12345, default_config)
    second = compute_fee_cents(method, 12345, default_config)
    assert first == second


def test_every_method_has_a_rule():
    assert set(FEE_SCHEDULE) == set(PayoutMethod)


def test_net_amount():
    assert compute_net_cents(10000, 0, 50) == 9950


def test_net_amount_is_clamped_at_zero():
    assert compute_net_cents(1000, 900, 200) == 0
    for gross in [0, 1, 50, 1000]:
        for platform_fee in [0, 10, 1000]:
            for payout_fee in [0, 25, 2000]:
                assert compute_net_cents(gross, platform_fee, payout_fee) >= 0


def test_breakdown(default_config):
    breakdown = get_breakdown("stripe_connect", 10000, default_config)

    assert breakdown.gross_cents == 10000
    assert breakdown.platform_fee_cents == 0
    assert breakdown.payout_fee_cents == 50
    assert breakdown.net_cents == 9950
    assert breakdown.gross_formatted == "$100.00"
    assert breakdown.platform_fee_formatted == "$0.00"
    assert breakdown.payout_fee_formatted == "$0.50"
    assert breakdown.net_formatted == "$99.50"


def test_breakdown_for_unknown_method_keeps_gross(default_config):
    breakdown = get_breakdown("wire", 5000, default_config)
    assert breakdown.payout_fee_cents == 0
    assert breakdown.net_cents == 5000


@pytest.mark.parametrize("method,expected", [
    ("stripe_connect", "0.25% + $0.25"),
    ("paypal", "2% (max $20.00)"),
    ("venmo", "2% (max $20.00)"),
    ("bank_ach", "$0.25"),
    ("wire", "Unknown method"),
])
def test_describe_fee_defaults(method, expected, default_config):
    assert describe_fee(method, default_config) == expected


def test_describe_fee_follows_config():
    custom = FeeConfig(
        stripe_percentage=0.5,
        stripe_fixed_cents=50,
        paypal_percentage=3.5,
        paypal_cap_cents=1500,
        bank_ach_cents=100,
    )
    assert describe_fee("stripe_connect", custom) == "0.5% + $0.50"
    assert describe_fee("paypal", custom) == "3.5% (max $15.00)"
    assert describe_fee("bank_ach", custom) == "$1.00"


@pytest.mark.parametrize("cents,currency,expected", [
    (0, "USD", "$0.00"),
    (5, "USD", "$0.05"),
    (123456, "USD", "$1,234.56"),
    (-50, "USD", "-$0.50"),
    (100, "eur", "€1.00"),
    (100, "JPY", "JPY 1.00"),
])
def test_format_currency(cents, currency, expected):
    assert format_currency(cents, currency) == expected


@pytest.mark.parametrize("percentage,expected", [
    (0.25, "0.25"),
    (2.0, "2"),
    (12.5, "12.5"),
    (100, "100"),
    (0, "0"),
])
def test_format_percentage(percentage, expected):
    assert format_percentage(percentage) == expected
