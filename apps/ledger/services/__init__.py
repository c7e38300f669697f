"""
Ledger app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    LedgerServiceError,
    CategoryNotFoundError,
    CategoryInUseError,
    CategoryTypeMismatchError,
    InvalidBudgetCategoryError,
)

from .category_management import (
    create_category,
    delete_category,
)

from .transaction_management import (
    record_transaction,
    update_transaction,
)

from .budget_management import (
    set_budget,
)

from .statistics import (
    monthly_summary,
    budget_status,
)


__all__ = [
    # Exceptions
    'LedgerServiceError',
    'CategoryNotFoundError',
    'CategoryInUseError',
    'CategoryTypeMismatchError',
    'InvalidBudgetCategoryError',

    # Category Management
    'create_category',
    'delete_category',

    # Transactions
    'record_transaction',
    'update_transaction',

    # Budgets
    'set_budget',

    # Statistics
    'monthly_summary',
    'budget_status',
]
