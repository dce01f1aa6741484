from abc import ABC, abstractmethod
from typing import Optional, Sequence

from django.db import connection, transaction

from apps.common.data_transfer_objects import FeeConfig, PayoutMethod
from apps.payouts.fees import compute_fee_cents, compute_net_cents

FEE_FUNCTION_PARAMS = ('p_method_type', 'p_amount_cents')
NET_FUNCTION_PARAMS = ('p_gross_cents', 'p_platform_fee_cents', 'p_payout_fee_cents')


def function_call_sql(name: str, params: Sequence[str], vendor: str) -> str:
    """
    SELECT statement calling a database function.

    PostgreSQL binds arguments by parameter name; other backends only accept
    positional arguments.
    """
    if vendor == 'postgresql':
        arguments = ", ".join(f"{param} => %s" for param in params)
    else:
        arguments = ", ".join("%s" for _ in params)
    return f"SELECT {name}({arguments})"


class MirroredFeeRepository(ABC):
    """The database's own copy of the payout fee formula and settings."""

    @abstractmethod
    def calculate_fee_cents(self, method: str, gross_cents: int) -> int:
        pass

    @abstractmethod
    def compute_net_cents(self, gross_cents: int, platform_fee_cents: int, payout_fee_cents: int) -> int:
        pass

    @abstractmethod
    def get_fee_config(self) -> Optional[FeeConfig]:
        pass


class DatabaseMirroredFeeRepository(MirroredFeeRepository):
    """
    Calls the calculate_payout_fee_cents, compute_net_payout_cents and
    get_payout_fee_config database functions. Database errors propagate to
    the caller.
    """

    def _call_scalar(self, name: str, params: Sequence[str], values: list) -> int:
        # Savepoint so a missing function does not poison an outer transaction
        with transaction.atomic():
            with connection.cursor() as cursor:
                cursor.execute(function_call_sql(name, params, connection.vendor), values)
                row = cursor.fetchone()
        if not row or row[0] is None:
            return 0
        return int(row[0])

    def calculate_fee_cents(self, method: str, gross_cents: int) -> int:
        if isinstance(method, PayoutMethod):
            method = method.value
        return self._call_scalar('calculate_payout_fee_cents', FEE_FUNCTION_PARAMS, [method, gross_cents])

    def compute_net_cents(self, gross_cents: int, platform_fee_cents: int, payout_fee_cents: int) -> int:
        return self._call_scalar(
            'compute_net_payout_cents',
            NET_FUNCTION_PARAMS,
            [gross_cents, platform_fee_cents, payout_fee_cents]
        )

    def get_fee_config(self) -> Optional[FeeConfig]:
        with transaction.atomic():
            with connection.cursor() as cursor:
                cursor.execute("SELECT * FROM get_payout_fee_config()")
                row = cursor.fetchone()
                columns = [column[0] for column in cursor.description] if row else []
        if not row:
            return None

        values = dict(zip(columns, row))
        return FeeConfig(**{
            field: float(values[field]) if field.endswith('_percentage') else int(values[field])
            for field in FeeConfig.model_fields
            if values.get(field) is not None
        })


class MockMirroredFeeRepository(MirroredFeeRepository):
    """In-process mirror that applies the local formula to a fixed config."""

    def __init__(self, config: Optional[FeeConfig] = None):
        self.config = config or FeeConfig()

    def calculate_fee_cents(self, method: str, gross_cents: int) -> int:
        return compute_fee_cents(method, gross_cents, self.config)

    def compute_net_cents(self, gross_cents: int, platform_fee_cents: int, payout_fee_cents: int) -> int:
        return compute_net_cents(gross_cents, platform_fee_cents, payout_fee_cents)

    def get_fee_config(self) -> Optional[FeeConfig]:
        return self.config
