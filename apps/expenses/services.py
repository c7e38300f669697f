"""Services for expense business logic."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db.models import Sum

from apps.accounts.models import User
from apps.expenses.models import Expense

logger = logging.getLogger(__name__)


def record_expense(*, recorded_by: Optional[User] = None, **fields) -> Expense:
    """Create an expense attributed to ``recorded_by``."""
    expense = Expense.objects.create(recorded_by=recorded_by, **fields)
    logger.info("Expense recorded: %s %s", expense.category, expense.amount)
    return expense


def expenses_in_window(start: Optional[datetime] = None, end: Optional[datetime] = None):
    """Expenses with ``start <= date < end``; either bound may be omitted."""
    queryset = Expense.objects.all()
    if start is not None:
        queryset = queryset.filter(date__gte=start)
    if end is not None:
        queryset = queryset.filter(date__lt=end)
    return queryset


def expenses_total(*, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Decimal:
    """Sum of expense amounts in the half-open window ``[start, end)``."""
    total = expenses_in_window(start, end).aggregate(total=Sum('amount'))['total']
    return total or Decimal('0.00')
