"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    MemberRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PendingApprovalError,
    MemberNotFoundError,
    CannotDeleteSelfError,
)
from .member_registration import register_member
from .member_authentication import authenticate_member
from .member_management import (
    approve_member,
    delete_member,
    update_profile,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'MemberRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'PendingApprovalError',
    'MemberNotFoundError',
    'CannotDeleteSelfError',
    # Services
    'register_member',
    'authenticate_member',
    'approve_member',
    'delete_member',
    'update_profile',
]
