"""Budget management service."""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.ledger.models import Budget, EntryType, TransactionCategory
from .exceptions import CategoryNotFoundError, InvalidBudgetCategoryError

logger = logging.getLogger(__name__)


@transaction.atomic
def set_budget(*, category_id: UUID, amount: Decimal) -> Optional[Budget]:
    """
    Set the monthly budget of an expense category.

    A positive amount creates or replaces the budget; zero or a negative
    amount removes it.

    Args:
        category_id: UUID of an expense category
        amount: New monthly limit

    Returns:
        The saved Budget, or None when the budget was removed

    Raises:
        CategoryNotFoundError: If category doesn't exist
        InvalidBudgetCategoryError: If the category is an income category
    """
    try:
        category = TransactionCategory.objects.get(id=category_id)
    except TransactionCategory.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")

    if category.type != EntryType.EXPENSE:
        raise InvalidBudgetCategoryError("Budgets can only be set on expense categories")

    if amount <= 0:
        deleted, _ = Budget.objects.filter(category=category).delete()
        if deleted:
            logger.info("Removed budget for %s", category.name)
        return None

    budget, _ = Budget.objects.update_or_create(
        category=category,
        defaults={'amount': amount},
    )
    return budget
