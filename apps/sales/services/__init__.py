"""
Sales app services layer.

Services contain business logic and orchestrate operations across models.
"""

from apps.sales.models import Order

from .exceptions import (
    SalesServiceError,
    EmptyCartError,
    OrderNotFoundError,
)

from .checkout import (
    OrderLine,
    merge_cart,
    create_order,
    checkout,
)

from .reports import (
    day_bounds,
    orders_in_window,
    sales_totals,
)


def get_order_by_id(*, order_id) -> Order:
    """
    Retrieve an order with its lines.

    Raises:
        OrderNotFoundError: If order doesn't exist
    """
    try:
        return Order.objects.prefetch_related('items').get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order with ID {order_id} not found")


__all__ = [
    # Exceptions
    'SalesServiceError',
    'EmptyCartError',
    'OrderNotFoundError',

    # Checkout
    'OrderLine',
    'merge_cart',
    'create_order',
    'checkout',

    # Reports
    'day_bounds',
    'orders_in_window',
    'sales_totals',
    'get_order_by_id',
]
