"""Domain-specific exceptions for sales services."""


class SalesServiceError(Exception):
    """Base exception for sales services."""
    pass


class EmptyCartError(SalesServiceError):
    """Raised when a checkout has no lines with a positive quantity."""
    pass


class OrderNotFoundError(SalesServiceError):
    """Raised when an order does not exist."""
    pass
