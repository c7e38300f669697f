"""Tests for the coworking tariff (pure functions, no database)."""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from django.test import override_settings

from apps.coworking.services import (
    calculate_coworking_cost,
    calculate_extras_cost,
    calculate_bill,
    elapsed_minutes,
    to_datetime,
)

START = datetime(2026, 3, 5, 10, 0, tzinfo=timezone.utc)


def after(**kwargs):
    return START + timedelta(**kwargs)


class TestCoworkingCost:

    @pytest.mark.parametrize('minutes, expected', [
        (45, Decimal('58.00')),
        (60, Decimal('58.00')),
        (61, Decimal('93.00')),
        (90, Decimal('93.00')),
        (91, Decimal('128.00')),
        (0, Decimal('0.00')),
    ])
    def test_tariff(self, minutes, expected):
        cost, elapsed = calculate_coworking_cost(START, after(minutes=minutes))

        assert cost == expected
        assert elapsed == minutes

    def test_partial_minute_is_billed_as_started(self):
        cost, minutes = calculate_coworking_cost(START, after(minutes=60, seconds=1))

        assert minutes == 61
        assert cost == Decimal('93.00')

    def test_single_millisecond(self):
        cost, minutes = calculate_coworking_cost(START, after(milliseconds=1))

        assert minutes == 1
        assert cost == Decimal('58.00')

    def test_negative_interval_is_free(self):
        cost, minutes = calculate_coworking_cost(START, after(minutes=-30))

        assert minutes == 0
        assert cost == Decimal('0.00')

    def test_same_input_same_output(self):
        first = calculate_coworking_cost(START, after(minutes=137))
        second = calculate_coworking_cost(START, after(minutes=137))

        assert first == second == (Decimal('163.00'), 137)

    def test_iso_strings(self):
        cost, minutes = calculate_coworking_cost('2026-03-05T10:00:00Z', '2026-03-05T11:31:00Z')

        assert (cost, minutes) == (Decimal('128.00'), 91)

    def test_epoch_seconds(self):
        start = START.timestamp()

        assert calculate_coworking_cost(start, start + 45 * 60) == (Decimal('58.00'), 45)

    def test_rate_overrides(self):
        cost, _ = calculate_coworking_cost(
            START, after(minutes=61), base_rate=Decimal('50'), block_rate=Decimal('20')
        )

        assert cost == Decimal('70.00')

    @override_settings(COWORKING_BASE_RATE=Decimal('60.00'), COWORKING_BLOCK_MINUTES=15)
    def test_rates_from_settings(self):
        cost, _ = calculate_coworking_cost(START, after(minutes=80))

        assert cost == Decimal('130.00')


class TestExtrasCost:

    def test_sum_of_lines(self):
        extras = [
            {'unit_price': Decimal('20.00'), 'quantity': 2},
            {'unit_price': Decimal('65.00'), 'quantity': 1},
        ]

        assert calculate_extras_cost(extras) == Decimal('105.00')

    def test_empty(self):
        assert calculate_extras_cost([]) == Decimal('0.00')

    def test_plain_numbers(self):
        assert calculate_extras_cost([{'unit_price': 12.5, 'quantity': 3}]) == Decimal('37.50')


class TestBill:

    def test_short_stay(self):
        bill = calculate_bill(START, after(minutes=45))

        assert bill['total'] == Decimal('58.00')
        assert bill['extras_cost'] == Decimal('0.00')

    def test_stay_with_extras(self):
        bill = calculate_bill(
            START, after(minutes=61), [{'unit_price': Decimal('20.00'), 'quantity': 2}]
        )

        assert bill == {
            'minutes': 61,
            'time_cost': Decimal('93.00'),
            'extras_cost': Decimal('40.00'),
            'total': Decimal('133.00'),
        }

    def test_ninety_one_minutes(self):
        assert calculate_bill(START, after(minutes=91))['total'] == Decimal('128.00')


class TestTimestamps:

    def test_naive_datetime_taken_as_utc(self):
        assert to_datetime(datetime(2026, 3, 5, 10, 0)) == START

    def test_invalid_string(self):
        with pytest.raises(ValueError):
            to_datetime('yesterday')

    def test_elapsed_minutes_mixed_inputs(self):
        assert elapsed_minutes('2026-03-05T10:00:00+00:00', after(minutes=30)) == 30

    def test_epoch_milliseconds(self):
        start = 1772704800000

        assert to_datetime(start) == START
        assert calculate_coworking_cost(start, start + 45 * 60 * 1000) == (Decimal('58.00'), 45)

    def test_epoch_out_of_range_is_clamped(self):
        assert to_datetime(1e30) == datetime.max.replace(tzinfo=timezone.utc)
        assert elapsed_minutes(START, 1e30) > 0
