"""
Cash app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    CashServiceError,
    DuplicateSessionError,
    NoActiveSessionError,
)

from .reconciliation import (
    Reconciliation,
    ReconciliationStatus,
    classify_difference,
    expected_cash,
    reconcile,
)

from .session_management import (
    get_open_session,
    get_active_session,
    start_day,
    close_day,
    current_report,
    session_history,
)


__all__ = [
    # Exceptions
    'CashServiceError',
    'DuplicateSessionError',
    'NoActiveSessionError',

    # Reconciliation
    'Reconciliation',
    'ReconciliationStatus',
    'classify_difference',
    'expected_cash',
    'reconcile',

    # Session lifecycle
    'get_open_session',
    'get_active_session',
    'start_day',
    'close_day',
    'current_report',
    'session_history',
]
