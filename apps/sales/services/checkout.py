"""
Checkout service.

Turns a cart into a persisted Order. Product names and prices are copied
onto the order lines so the order stays correct after catalog changes.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from django.db import transaction

from apps.accounts.models import User
from apps.catalog.models import Product
from apps.sales.models import Order, OrderItem
from .exceptions import EmptyCartError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderLine:
    """A priced order line ready to be persisted."""
    product: Optional[Product]
    name: str
    price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


def merge_cart(items: Iterable[dict]) -> list[OrderLine]:
    """
    Collapse cart entries into priced lines.

    Entries for the same product are summed; lines whose resulting quantity
    is not positive are dropped. Line order follows first appearance.

    Args:
        items: Iterable of ``{'product': Product, 'quantity': int}``
    """
    quantities = {}
    products = {}
    for item in items:
        product = item['product']
        products.setdefault(product.pk, product)
        quantities[product.pk] = quantities.get(product.pk, 0) + item['quantity']

    return [
        OrderLine(
            product=products[pk],
            name=products[pk].name,
            price=products[pk].price,
            quantity=quantity,
        )
        for pk, quantity in quantities.items()
        if quantity > 0
    ]


@transaction.atomic
def create_order(
    *,
    lines: list[OrderLine],
    service_type: str,
    payment_method: str,
    client_name: str = '',
    created_by: Optional[User] = None,
    date: Optional[datetime] = None
) -> Order:
    """
    Persist an order with its lines. Total is the sum of line subtotals.

    Raises:
        EmptyCartError: If ``lines`` is empty
    """
    if not lines:
        raise EmptyCartError("Cannot create an order without items")

    total = sum((line.subtotal for line in lines), Decimal('0.00'))
    extra = {'date': date} if date is not None else {}
    order = Order.objects.create(
        total=total,
        client_name=client_name,
        service_type=service_type,
        payment_method=payment_method,
        created_by=created_by,
        **extra,
    )
    OrderItem.objects.bulk_create([
        OrderItem(
            order=order,
            product=line.product,
            product_name=line.name,
            price=line.price,
            quantity=line.quantity,
        )
        for line in lines
    ])

    logger.info(
        "Order %s created: %s %s, total %s",
        order.id, service_type, payment_method, total
    )
    return order


def checkout(
    *,
    items: Iterable[dict],
    service_type: str,
    payment_method: str,
    client_name: str = '',
    created_by: Optional[User] = None
) -> Order:
    """
    Check out a cart.

    Args:
        items: Cart entries ``{'product': Product, 'quantity': int}``
        service_type: Table, takeaway or coworking
        payment_method: Cash or card
        client_name: Optional client name
        created_by: Member operating the register

    Returns:
        The created Order

    Raises:
        EmptyCartError: If no entry has a positive quantity
    """
    lines = merge_cart(items)
    if not lines:
        logger.warning("Checkout rejected: empty cart")
        raise EmptyCartError("Cart is empty")

    return create_order(
        lines=lines,
        service_type=service_type,
        payment_method=payment_method,
        client_name=client_name,
        created_by=created_by,
    )
