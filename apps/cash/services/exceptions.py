"""Domain-specific exceptions for cash register services."""


class CashServiceError(Exception):
    """Base exception for cash register services."""
    pass


class DuplicateSessionError(CashServiceError):
    """Raised when opening a day while another cash session is open."""
    pass


class NoActiveSessionError(CashServiceError):
    """Raised when an operation needs an open cash session and there is none."""
    pass
