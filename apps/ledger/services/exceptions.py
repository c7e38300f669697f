"""
Domain-specific exceptions for ledger app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class LedgerServiceError(Exception):
    """Base exception for all ledger service errors."""
    pass


class CategoryNotFoundError(LedgerServiceError):
    """Raised when a transaction category does not exist."""
    pass


class CategoryInUseError(LedgerServiceError):
    """Raised when deleting a category still referenced by transactions or a budget."""
    pass


class CategoryTypeMismatchError(LedgerServiceError):
    """Raised when an entry's type differs from its category's type."""
    pass


class InvalidBudgetCategoryError(LedgerServiceError):
    """Raised when a budget is set on an income category."""
    pass
