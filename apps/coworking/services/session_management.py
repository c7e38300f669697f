"""
Coworking session lifecycle.

Sessions are active until finished. Finishing happens once: it fixes the
end time and total and records an order with service type coworking, so
cash paid for coworking is part of the cash session reconciliation.
"""

import logging
from datetime import datetime
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.catalog.services import get_product_by_id
from apps.coworking.models import CoworkingSession, CoworkingStatus, ConsumedExtra
from apps.sales.models import ServiceType
from apps.sales.services import OrderLine, create_order
from .exceptions import (
    SessionNotFoundError,
    SessionAlreadyFinishedError,
    ExtraNotFoundError,
    InvalidExtraProductError,
)
from .pricing import calculate_bill

logger = logging.getLogger(__name__)


def get_session(*, session_id, for_update: bool = False) -> CoworkingSession:
    """
    Retrieve a session.

    Raises:
        SessionNotFoundError: If session doesn't exist
    """
    queryset = CoworkingSession.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=session_id)
    except CoworkingSession.DoesNotExist:
        raise SessionNotFoundError(f"Coworking session with ID {session_id} not found")


def _ensure_active(session: CoworkingSession) -> None:
    if not session.is_active:
        logger.warning("Rejected change to finished coworking session %s", session.id)
        raise SessionAlreadyFinishedError(
            f"Coworking session for {session.client_name} is already finished"
        )


def start_session(
    *,
    client_name: str = '',
    started_by: Optional[User] = None,
    now: Optional[datetime] = None
) -> CoworkingSession:
    """
    Start a session. A blank client name becomes ``Client <n>``.
    """
    client_name = client_name.strip()
    if not client_name:
        client_name = f"Client {CoworkingSession.objects.count() + 1}"

    session = CoworkingSession.objects.create(
        client_name=client_name,
        start_time=now or timezone.now(),
        started_by=started_by,
    )
    logger.info("Coworking session %s started for %s", session.id, client_name)
    return session


@transaction.atomic
def add_extra(*, session_id, product_id, quantity: int = 1) -> ConsumedExtra:
    """
    Add ``quantity`` of a product to an active session.

    The current product price is captured. A product already consumed at
    the same price has its quantity increased instead of getting a new line.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionAlreadyFinishedError: If session is finished
        ProductNotFoundError: If product doesn't exist
        InvalidExtraProductError: If product is not a fridge or food item
    """
    session = get_session(session_id=session_id, for_update=True)
    _ensure_active(session)

    product = get_product_by_id(product_id=product_id)
    if not product.is_extra:
        raise InvalidExtraProductError(
            f"'{product.name}' ({product.category}) cannot be added as a coworking extra"
        )

    extra = session.extras.filter(product=product, unit_price=product.price).first()
    if extra is None:
        extra = ConsumedExtra.objects.create(
            session=session,
            product=product,
            product_name=product.name,
            unit_price=product.price,
            quantity=quantity,
        )
    else:
        extra.quantity += quantity
        extra.save(update_fields=['quantity'])
    return extra


@transaction.atomic
def remove_extra(*, session_id, extra_id, quantity: Optional[int] = None) -> Optional[ConsumedExtra]:
    """
    Remove an extra from an active session.

    Without ``quantity`` the whole line is removed; otherwise the line is
    decremented and removed once it reaches zero.

    Returns:
        The remaining line, or None if it was removed

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionAlreadyFinishedError: If session is finished
        ExtraNotFoundError: If the extra is not part of the session
    """
    session = get_session(session_id=session_id, for_update=True)
    _ensure_active(session)

    try:
        extra = session.extras.get(id=extra_id)
    except ConsumedExtra.DoesNotExist:
        raise ExtraNotFoundError(f"Extra {extra_id} is not part of this session")

    if quantity is None or quantity >= extra.quantity:
        extra.delete()
        return None

    extra.quantity -= quantity
    extra.save(update_fields=['quantity'])
    return extra


def estimate_bill(*, session_id, now: Optional[datetime] = None) -> dict:
    """
    Running bill for a session up to ``now``. Finished sessions are billed
    up to their end time.

    Raises:
        SessionNotFoundError: If session doesn't exist
    """
    session = get_session(session_id=session_id)
    end = session.end_time if not session.is_active else (now or timezone.now())
    bill = calculate_bill(session.start_time, end, session.extras.all())
    return {**bill, 'currency': settings.CURRENCY}


@transaction.atomic
def finish_session(
    *,
    session_id,
    payment_method: str,
    finished_by: Optional[User] = None,
    now: Optional[datetime] = None
) -> CoworkingSession:
    """
    Finish a session and record the sale.

    The order holds one line per extra plus a line for the time charge.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionAlreadyFinishedError: If session is already finished
    """
    session = get_session(session_id=session_id, for_update=True)
    _ensure_active(session)

    end = now or timezone.now()
    extras = list(session.extras.all())
    bill = calculate_bill(session.start_time, end, extras)

    lines = [
        OrderLine(
            product=extra.product,
            name=extra.product_name,
            price=extra.unit_price,
            quantity=extra.quantity,
        )
        for extra in extras
    ]
    lines.append(OrderLine(
        product=None,
        name=f"Coworking: {session.client_name} ({bill['minutes']} min)",
        price=bill['time_cost'],
        quantity=1,
    ))

    order = create_order(
        lines=lines,
        service_type=ServiceType.COWORKING,
        payment_method=payment_method,
        client_name=session.client_name,
        created_by=finished_by,
        date=end,
    )

    session.status = CoworkingStatus.FINISHED
    session.end_time = end
    session.total = bill['total']
    session.order = order
    session.save()

    logger.info(
        "Coworking session %s finished: %d min, total %s (%s)",
        session.id, bill['minutes'], bill['total'], payment_method
    )
    return session
