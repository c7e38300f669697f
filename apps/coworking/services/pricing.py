"""
Coworking pricing.

Pure functions with no clock of their own: callers always pass the end of
the interval. Rates default to the COWORKING_* settings.

Tariff:
    0 minutes                -> 0
    1..base_minutes          -> base_rate
    above base_minutes       -> base_rate + block_rate per started block
"""

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal, ROUND_HALF_UP
from numbers import Number
from typing import Iterable, Optional, Union

from django.conf import settings
from django.utils import timezone
from django.utils.dateparse import parse_datetime

CENT = Decimal('0.01')
MICROSECONDS_PER_MINUTE = 60 * 1000 * 1000
# Epoch numbers at or above this magnitude are milliseconds (year 5138 in seconds).
EPOCH_MILLISECONDS_THRESHOLD = 1e11

Timestamp = Union[datetime, str, int, float]


def from_epoch(value: float) -> datetime:
    if abs(value) >= EPOCH_MILLISECONDS_THRESHOLD:
        value /= 1000
    try:
        return datetime.fromtimestamp(value, tz=dt_timezone.utc)
    except (OverflowError, OSError, ValueError):
        bound = datetime.max if value > 0 else datetime.min
        return bound.replace(tzinfo=dt_timezone.utc)


def to_datetime(value: Timestamp) -> datetime:
    """
    Normalize a timestamp to an aware datetime.

    Accepts datetimes, ISO-8601 strings and epoch numbers. Epoch numbers are
    seconds, or milliseconds when their magnitude reaches
    EPOCH_MILLISECONDS_THRESHOLD. Epochs outside the datetime range are
    clamped to its bounds. Naive values are taken as UTC.

    Raises:
        ValueError: If a string is not a valid ISO-8601 datetime
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, Number) and not isinstance(value, bool):
        return from_epoch(float(value))
    else:
        parsed = parse_datetime(str(value))
        if parsed is None:
            raise ValueError(f"Invalid timestamp: {value!r}")

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def elapsed_minutes(start_time: Timestamp, end_time: Timestamp) -> int:
    """Started minutes between two timestamps; 0 when end is not after start."""
    delta = to_datetime(end_time) - to_datetime(start_time)
    microseconds = (delta.days * 86400 + delta.seconds) * 1000000 + delta.microseconds
    # ceiling division
    return max(0, -(-microseconds // MICROSECONDS_PER_MINUTE))


def time_cost(
    minutes: int,
    *,
    base_rate: Optional[Decimal] = None,
    block_rate: Optional[Decimal] = None,
    base_minutes: Optional[int] = None,
    block_minutes: Optional[int] = None
) -> Decimal:
    """Price of ``minutes`` of coworking time."""
    base_rate = settings.COWORKING_BASE_RATE if base_rate is None else base_rate
    block_rate = settings.COWORKING_BLOCK_RATE if block_rate is None else block_rate
    base_minutes = settings.COWORKING_BASE_MINUTES if base_minutes is None else base_minutes
    block_minutes = settings.COWORKING_BLOCK_MINUTES if block_minutes is None else block_minutes

    if minutes <= 0:
        cost = Decimal('0')
    elif minutes <= base_minutes:
        cost = Decimal(base_rate)
    else:
        blocks = -(-(minutes - base_minutes) // block_minutes)
        cost = Decimal(base_rate) + Decimal(block_rate) * blocks
    return cost.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_coworking_cost(start_time: Timestamp, end_time: Timestamp, **rates) -> tuple[Decimal, int]:
    """
    Time charge for a session.

    Args:
        start_time: When the session started
        end_time: When it ended (or "now" for an estimate)
        **rates: Optional overrides passed to ``time_cost``

    Returns:
        Tuple of (cost, minutes)

    Example:
        >>> calculate_coworking_cost('2026-01-01T10:00:00Z', '2026-01-01T11:01:00Z')
        (Decimal('93.00'), 61)
    """
    minutes = elapsed_minutes(start_time, end_time)
    return time_cost(minutes, **rates), minutes


def _extra_field(extra, name):
    if isinstance(extra, dict):
        return extra[name]
    return getattr(extra, name)


def calculate_extras_cost(extras: Iterable) -> Decimal:
    """Sum of ``unit_price * quantity`` over mappings or objects."""
    total = Decimal('0')
    for extra in extras:
        unit_price = _extra_field(extra, 'unit_price')
        if not isinstance(unit_price, Decimal):
            unit_price = Decimal(str(unit_price))
        total += unit_price * int(_extra_field(extra, 'quantity'))
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_bill(start_time: Timestamp, end_time: Timestamp, extras: Iterable = (), **rates) -> dict:
    """
    Full bill for a session: time charge plus extras.

    Returns:
        Dictionary with ``minutes``, ``time_cost``, ``extras_cost`` and ``total``
    """
    cost, minutes = calculate_coworking_cost(start_time, end_time, **rates)
    extras_cost = calculate_extras_cost(extras)
    return {
        'minutes': minutes,
        'time_cost': cost,
        'extras_cost': extras_cost,
        'total': cost + extras_cost,
    }
