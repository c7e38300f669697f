"""
Coworking app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    CoworkingServiceError,
    SessionNotFoundError,
    SessionAlreadyFinishedError,
    ExtraNotFoundError,
    InvalidExtraProductError,
)

from .pricing import (
    to_datetime,
    elapsed_minutes,
    time_cost,
    calculate_coworking_cost,
    calculate_extras_cost,
    calculate_bill,
)

from .session_management import (
    get_session,
    start_session,
    add_extra,
    remove_extra,
    estimate_bill,
    finish_session,
)


__all__ = [
    # Exceptions
    'CoworkingServiceError',
    'SessionNotFoundError',
    'SessionAlreadyFinishedError',
    'ExtraNotFoundError',
    'InvalidExtraProductError',

    # Pricing
    'to_datetime',
    'elapsed_minutes',
    'time_cost',
    'calculate_coworking_cost',
    'calculate_extras_cost',
    'calculate_bill',

    # Session lifecycle
    'get_session',
    'start_session',
    'add_extra',
    'remove_extra',
    'estimate_bill',
    'finish_session',
]
