import pytest
from datetime import datetime, timezone
from decimal import Decimal
from apps.sales.models import Order, OrderItem, PaymentMethod, ServiceType


def _order(date, total, payment_method, service_type=ServiceType.TABLE):
    order = Order.objects.create(
        date=date,
        total=Decimal(total),
        payment_method=payment_method,
        service_type=service_type,
    )
    OrderItem.objects.create(
        order=order,
        product_name='Espresso',
        price=Decimal(total),
        quantity=1,
    )
    return order


@pytest.fixture
def march_orders(db):
    """Three orders on 2026-03-05 and one on 2026-03-06 (UTC)."""
    return [
        _order(datetime(2026, 3, 5, 9, 0, tzinfo=timezone.utc), '120.00', PaymentMethod.CASH),
        _order(datetime(2026, 3, 5, 12, 30, tzinfo=timezone.utc), '80.50', PaymentMethod.CARD),
        _order(datetime(2026, 3, 5, 18, 0, tzinfo=timezone.utc), '45.00', PaymentMethod.CASH,
               ServiceType.TAKEAWAY),
        _order(datetime(2026, 3, 6, 10, 0, tzinfo=timezone.utc), '200.00', PaymentMethod.CASH),
    ]
