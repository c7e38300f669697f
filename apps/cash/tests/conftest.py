import pytest
from datetime import datetime, timezone
from decimal import Decimal
from apps.cash.models import CashSession, CashSessionStatus
from apps.expenses.models import Expense, ExpenseCategory
from apps.sales.models import Order, PaymentMethod, ServiceType

OPENED_AT = datetime(2026, 3, 5, 8, 0, tzinfo=timezone.utc)
CLOSE_AT = datetime(2026, 3, 5, 22, 0, tzinfo=timezone.utc)


@pytest.fixture
def open_session(db):
    """Register opened at 08:00 with a 300.00 float."""
    return CashSession.objects.create(
        start_date=OPENED_AT,
        start_amount=Decimal('300.00'),
        status=CashSessionStatus.OPEN,
    )


@pytest.fixture
def day_activity(db):
    """
    Activity around the open session: 450.50 in cash sales and 120.00 of
    expenses inside the session, plus entries outside it that must be ignored.
    """
    def order(hour, minute, total, method):
        return Order.objects.create(
            date=datetime(2026, 3, 5, hour, minute, tzinfo=timezone.utc),
            total=Decimal(total),
            payment_method=method,
            service_type=ServiceType.TABLE,
        )

    order(9, 15, '250.00', PaymentMethod.CASH)
    order(13, 40, '200.50', PaymentMethod.CASH)
    order(14, 0, '99.00', PaymentMethod.CARD)
    # before opening
    order(7, 59, '1000.00', PaymentMethod.CASH)
    # at closing time, excluded by the half-open window
    order(22, 0, '500.00', PaymentMethod.CASH)

    Expense.objects.create(
        date=datetime(2026, 3, 5, 11, 0, tzinfo=timezone.utc),
        description='Ice',
        amount=Decimal('120.00'),
        category=ExpenseCategory.INVENTORY,
    )
    Expense.objects.create(
        date=datetime(2026, 3, 4, 11, 0, tzinfo=timezone.utc),
        description='Yesterday',
        amount=Decimal('75.00'),
        category=ExpenseCategory.OTHER,
    )
