"""Sales aggregation over time windows."""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from django.db.models import Sum, Count, Q
from django.utils import timezone

from apps.sales.models import Order, PaymentMethod


def day_bounds(date_from: Optional[date], date_to: Optional[date]):
    """
    Convert an inclusive calendar-day range into a half-open datetime window
    in the current time zone. Missing bounds stay ``None``.
    """
    start = end = None
    if date_from is not None:
        start = timezone.make_aware(datetime.combine(date_from, time.min))
    if date_to is not None:
        end = timezone.make_aware(datetime.combine(date_to + timedelta(days=1), time.min))
    return start, end


def orders_in_window(start: Optional[datetime] = None, end: Optional[datetime] = None):
    """Orders with ``start <= date < end``; either bound may be omitted."""
    queryset = Order.objects.all()
    if start is not None:
        queryset = queryset.filter(date__gte=start)
    if end is not None:
        queryset = queryset.filter(date__lt=end)
    return queryset


def sales_totals(*, start: Optional[datetime] = None, end: Optional[datetime] = None) -> dict:
    """
    Total, cash and card sales for the half-open window ``[start, end)``.

    Returns:
        Dictionary with ``total_sales``, ``cash_sales``, ``card_sales`` and
        ``order_count``
    """
    result = orders_in_window(start, end).aggregate(
        total_sales=Sum('total'),
        cash_sales=Sum('total', filter=Q(payment_method=PaymentMethod.CASH)),
        card_sales=Sum('total', filter=Q(payment_method=PaymentMethod.CARD)),
        order_count=Count('id'),
    )
    zero = Decimal('0.00')
    return {
        'total_sales': result['total_sales'] or zero,
        'cash_sales': result['cash_sales'] or zero,
        'card_sales': result['card_sales'] or zero,
        'order_count': result['order_count'],
    }
