"""
Cash drawer reconciliation.

Pure arithmetic over already-aggregated amounts; no database access.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from django.db import models

CENT = Decimal('0.01')


class ReconciliationStatus(models.TextChoices):
    SURPLUS = 'surplus', 'Surplus'
    SHORTFALL = 'shortfall', 'Shortfall'
    BALANCED = 'balanced', 'Balanced'


@dataclass(frozen=True)
class Reconciliation:
    expected_amount: Decimal
    difference: Decimal

    @property
    def status(self) -> str:
        return classify_difference(self.difference)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # via str so 450.5 becomes Decimal('450.5')
    return Decimal(str(value))


def classify_difference(difference) -> str:
    """Surplus when positive, shortfall when negative, otherwise balanced."""
    difference = _to_decimal(difference)
    if difference > 0:
        return ReconciliationStatus.SURPLUS
    if difference < 0:
        return ReconciliationStatus.SHORTFALL
    return ReconciliationStatus.BALANCED


def expected_cash(*, start_amount, cash_sales, cash_expenses) -> Decimal:
    """
    Cash that should be in the drawer. The result may be negative when
    expenses exceed the float plus cash sales.
    """
    expected = _to_decimal(start_amount) + _to_decimal(cash_sales) - _to_decimal(cash_expenses)
    return expected.quantize(CENT, rounding=ROUND_HALF_UP)


def reconcile(*, start_amount, cash_sales, cash_expenses, counted_amount) -> Reconciliation:
    """
    Compare the counted drawer against the expected amount.

    Args:
        start_amount: Float the day was opened with
        cash_sales: Sum of cash-paid orders during the session
        cash_expenses: Sum of expenses during the session
        counted_amount: Cash physically counted at close

    Returns:
        Reconciliation with ``expected_amount`` and
        ``difference = counted_amount - expected_amount``

    Example:
        >>> r = reconcile(start_amount=300, cash_sales='450.50',
        ...               cash_expenses=120, counted_amount=600)
        >>> r.expected_amount, r.difference
        (Decimal('630.50'), Decimal('-30.50'))
    """
    expected = expected_cash(
        start_amount=start_amount,
        cash_sales=cash_sales,
        cash_expenses=cash_expenses,
    )
    difference = (_to_decimal(counted_amount) - expected).quantize(CENT, rounding=ROUND_HALF_UP)
    return Reconciliation(expected_amount=expected, difference=difference)
