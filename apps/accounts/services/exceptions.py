"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class MemberRegistrationError(AccountsServiceError):
    """Raised when member registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class PendingApprovalError(AccountsServiceError):
    """Raised when a member has not been approved by an admin yet."""
    pass


class MemberNotFoundError(AccountsServiceError):
    """Raised when member does not exist."""
    pass


class CannotDeleteSelfError(AccountsServiceError):
    """Raised when an admin tries to delete their own account."""
    pass
