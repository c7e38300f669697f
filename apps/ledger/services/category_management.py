"""Category management service."""

import logging
from uuid import UUID

from django.db import transaction

from apps.ledger.models import TransactionCategory
from .exceptions import CategoryNotFoundError, CategoryInUseError

logger = logging.getLogger(__name__)


def create_category(*, name: str, type: str, icon: str = '') -> TransactionCategory:
    """Create a new income or expense category."""
    return TransactionCategory.objects.create(name=name, type=type, icon=icon)


@transaction.atomic
def delete_category(*, category_id: UUID) -> None:
    """
    Delete a category that nothing references anymore.

    Args:
        category_id: UUID of the category

    Raises:
        CategoryNotFoundError: If category doesn't exist
        CategoryInUseError: If transactions or a budget still use it
    """
    try:
        category = TransactionCategory.objects.select_for_update().get(id=category_id)
    except TransactionCategory.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")

    if category.transactions.exists():
        raise CategoryInUseError(
            "Category cannot be deleted because it is used by one or more transactions"
        )
    if hasattr(category, 'budget'):
        raise CategoryInUseError(
            "Category cannot be deleted because it is used by a budget"
        )

    category.delete()
    logger.info("Deleted category %s", category.name)
