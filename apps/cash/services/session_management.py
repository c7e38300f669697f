"""
Cash session lifecycle.

A session moves from open to closed exactly once. Opening is rejected while
another session is open; the partial unique constraint on open sessions
backs the check against concurrent requests.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.cash.models import CashSession, CashSessionStatus
from apps.expenses.services import expenses_total
from apps.sales.services import sales_totals
from .exceptions import DuplicateSessionError, NoActiveSessionError
from .reconciliation import reconcile, expected_cash

logger = logging.getLogger(__name__)


def get_open_session() -> Optional[CashSession]:
    """Return the open session, if any."""
    return CashSession.objects.filter(status=CashSessionStatus.OPEN).first()


def get_active_session() -> CashSession:
    """
    Return the open session.

    Raises:
        NoActiveSessionError: If no session is open
    """
    session = get_open_session()
    if session is None:
        raise NoActiveSessionError("No open cash session")
    return session


def start_day(
    *,
    start_amount: Decimal,
    opened_by: Optional[User] = None,
    now: Optional[datetime] = None
) -> CashSession:
    """
    Open the register with ``start_amount`` in the drawer.

    Raises:
        DuplicateSessionError: If a session is already open. The open
            session is left untouched.
    """
    if get_open_session() is not None:
        logger.warning("Rejected opening a cash session: one is already open")
        raise DuplicateSessionError("A cash session is already open")

    try:
        with transaction.atomic():
            session = CashSession.objects.create(
                start_date=now or timezone.now(),
                start_amount=start_amount,
                status=CashSessionStatus.OPEN,
                opened_by=opened_by,
            )
    except IntegrityError:
        logger.warning("Rejected opening a cash session: concurrent open detected")
        raise DuplicateSessionError("A cash session is already open")

    logger.info("Cash session %s opened with %s", session.id, start_amount)
    return session


def _window_totals(session: CashSession, end: datetime) -> dict:
    sales = sales_totals(start=session.start_date, end=end)
    return {
        'cash_sales': sales['cash_sales'],
        'card_sales': sales['card_sales'],
        'total_sales': sales['total_sales'],
        'total_expenses': expenses_total(start=session.start_date, end=end),
    }


@transaction.atomic
def close_day(
    *,
    counted_amount: Decimal,
    closed_by: Optional[User] = None,
    now: Optional[datetime] = None
) -> CashSession:
    """
    Close the open session against the counted drawer.

    Cash sales and expenses are taken from the window
    ``[start_date, now)``. The expected amount and difference are stored
    on the session.

    Raises:
        NoActiveSessionError: If no session is open
    """
    session = (
        CashSession.objects
        .select_for_update()
        .filter(status=CashSessionStatus.OPEN)
        .first()
    )
    if session is None:
        logger.warning("Rejected closing the register: no open cash session")
        raise NoActiveSessionError("No open cash session to close")

    end = now or timezone.now()
    totals = _window_totals(session, end)
    result = reconcile(
        start_amount=session.start_amount,
        cash_sales=totals['cash_sales'],
        cash_expenses=totals['total_expenses'],
        counted_amount=counted_amount,
    )

    session.status = CashSessionStatus.CLOSED
    session.end_date = end
    session.end_amount = counted_amount
    session.expected_amount = result.expected_amount
    session.difference = result.difference
    session.closed_by = closed_by
    session.save()

    logger.info(
        "Cash session %s closed: expected %s, counted %s, difference %s (%s)",
        session.id, result.expected_amount, counted_amount, result.difference, result.status
    )
    return session


def current_report(*, now: Optional[datetime] = None) -> dict:
    """
    Live figures for the open session up to ``now``.

    Raises:
        NoActiveSessionError: If no session is open
    """
    session = get_active_session()
    totals = _window_totals(session, now or timezone.now())
    return {
        'session': session,
        'start_amount': session.start_amount,
        **totals,
        'expected_cash': expected_cash(
            start_amount=session.start_amount,
            cash_sales=totals['cash_sales'],
            cash_expenses=totals['total_expenses'],
        ),
        'currency': settings.CURRENCY,
    }


def session_history(*, start: Optional[datetime] = None, end: Optional[datetime] = None) -> dict:
    """
    Closed sessions that started in ``[start, end)``, newest first, with the
    sales totals for the same window.
    """
    sessions = CashSession.objects.filter(status=CashSessionStatus.CLOSED)
    if start is not None:
        sessions = sessions.filter(start_date__gte=start)
    if end is not None:
        sessions = sessions.filter(start_date__lt=end)

    return {
        'sessions': list(sessions),
        'totals': sales_totals(start=start, end=end),
    }
