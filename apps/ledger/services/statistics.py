"""Statistics service - monthly household summaries and budget tracking."""

import calendar
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Sum, DecimalField, Value
from django.db.models.functions import Coalesce

from apps.ledger.models import Budget, EntryType, Transaction, TransactionCategory

ZERO = Decimal('0.00')
CENT = Decimal('0.01')

# Budget usage above this percentage is flagged as a warning
WARNING_THRESHOLD = Decimal('75')


def month_bounds(year: int, month: int) -> tuple:
    """Return the first and last day of the given month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def _sum_amount(queryset) -> Decimal:
    return queryset.aggregate(
        total=Coalesce(Sum('amount'), Value(ZERO), output_field=DecimalField())
    )['total']


def monthly_summary(*, year: int, month: int) -> dict:
    """
    Summarize household income and expenses for one month.

    Args:
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        Dictionary with:
        - total_income: Decimal
        - total_expenses: Decimal
        - net_savings: Decimal (income minus expenses, may be negative)
        - expenses_by_category: list of {category_id, name, icon, total},
          largest first
    """
    start, end = month_bounds(year, month)
    entries = Transaction.objects.filter(date__gte=start, date__lte=end)

    total_income = _sum_amount(entries.filter(type=EntryType.INCOME))
    total_expenses = _sum_amount(entries.filter(type=EntryType.EXPENSE))

    by_category = (
        entries.filter(type=EntryType.EXPENSE)
        .values('category_id', 'category__name', 'category__icon')
        .annotate(total=Sum('amount'))
        .order_by('-total')
    )

    return {
        'year': year,
        'month': month,
        'total_income': total_income,
        'total_expenses': total_expenses,
        'net_savings': total_income - total_expenses,
        'expenses_by_category': [
            {
                'category_id': row['category_id'],
                'name': row['category__name'],
                'icon': row['category__icon'],
                'total': row['total'],
            }
            for row in by_category
        ],
    }


def _usage_level(percentage: Decimal) -> str:
    if percentage >= 100:
        return 'exceeded'
    if percentage > WARNING_THRESHOLD:
        return 'warning'
    return 'ok'


def budget_status(*, year: int, month: int) -> dict:
    """
    Compare each expense category's spending against its budget.

    Categories without a budget are listed with a zero budget and 0 %
    usage so that spending is still visible.

    Returns:
        Dictionary with total_budgeted, total_spent and a ``categories``
        list of {category_id, name, icon, budgeted, spent, remaining,
        percentage, level}.
    """
    start, end = month_bounds(year, month)
    spent_by_category = dict(
        Transaction.objects
        .filter(type=EntryType.EXPENSE, date__gte=start, date__lte=end)
        .values('category_id')
        .annotate(total=Sum('amount'))
        .values_list('category_id', 'total')
    )
    budgets = dict(Budget.objects.values_list('category_id', 'amount'))

    categories = []
    for category in TransactionCategory.objects.filter(type=EntryType.EXPENSE):
        budgeted = budgets.get(category.id, ZERO)
        spent = spent_by_category.get(category.id) or ZERO
        if budgeted > 0:
            percentage = (spent / budgeted * 100).quantize(CENT, rounding=ROUND_HALF_UP)
        else:
            percentage = ZERO
        categories.append({
            'category_id': category.id,
            'name': category.name,
            'icon': category.icon,
            'budgeted': budgeted,
            'spent': spent,
            'remaining': budgeted - spent,
            'percentage': percentage,
            'level': _usage_level(percentage),
        })

    return {
        'year': year,
        'month': month,
        'total_budgeted': sum(budgets.values(), ZERO),
        'total_spent': sum(spent_by_category.values(), ZERO),
        'categories': categories,
    }
