"""Transaction recording service."""

from datetime import date
from decimal import Decimal

from apps.accounts.models import User
from apps.ledger.models import Transaction, TransactionCategory
from .exceptions import CategoryTypeMismatchError


def _check_category_type(category: TransactionCategory, entry_type: str) -> None:
    if category.type != entry_type:
        raise CategoryTypeMismatchError(
            f"Category '{category.name}' is for {category.type} entries, not {entry_type}"
        )


def record_transaction(
    *,
    member: User,
    date: date,
    description: str,
    amount: Decimal,
    type: str,
    category: TransactionCategory
) -> Transaction:
    """
    Record an income or expense entry attributed to ``member``.

    Raises:
        CategoryTypeMismatchError: If the category type differs from ``type``
    """
    _check_category_type(category, type)
    return Transaction.objects.create(
        member=member,
        date=date,
        description=description,
        amount=amount,
        type=type,
        category=category,
    )


def update_transaction(*, transaction: Transaction, **changes) -> Transaction:
    """
    Apply changes to an existing entry. The recording member never changes.

    Raises:
        CategoryTypeMismatchError: If the resulting category/type pair differs
    """
    changes.pop('member', None)
    for field, value in changes.items():
        setattr(transaction, field, value)

    _check_category_type(transaction.category, transaction.type)
    transaction.save()
    return transaction
