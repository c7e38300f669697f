"""
Service layer tests for the coworking session lifecycle.

Tests cover:
- Starting sessions and default client names
- Adding / removing extras with captured prices
- Finishing once and recording the coworking order
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from apps.catalog.services import ProductNotFoundError
from apps.coworking.models import CoworkingStatus, ConsumedExtra
from apps.coworking.services import (
    start_session,
    add_extra,
    remove_extra,
    estimate_bill,
    finish_session,
)
from apps.coworking.services.exceptions import (
    SessionNotFoundError,
    SessionAlreadyFinishedError,
    ExtraNotFoundError,
    InvalidExtraProductError,
)
from apps.sales.models import PaymentMethod, ServiceType
from apps.sales.services import sales_totals

START = datetime(2026, 3, 5, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def session(db):
    return start_session(client_name='Ana', now=START)


@pytest.mark.django_db
class TestStartSession:

    def test_start(self, member):
        session = start_session(client_name='  Luis ', started_by=member, now=START)

        assert session.client_name == 'Luis'
        assert session.status == CoworkingStatus.ACTIVE
        assert session.total == Decimal('0.00')

    def test_default_client_name(self, session):
        second = start_session()

        assert second.client_name == 'Client 2'


@pytest.mark.django_db
class TestExtras:

    def test_add_extra_captures_price(self, session, soda):
        extra = add_extra(session_id=session.id, product_id=soda.id, quantity=2)

        soda.price = Decimal('25.00')
        soda.save()

        extra.refresh_from_db()
        assert extra.unit_price == Decimal('20.00')
        assert extra.product_name == 'Soda'
        assert extra.quantity == 2

    def test_same_product_same_price_merges(self, session, soda):
        add_extra(session_id=session.id, product_id=soda.id)
        extra = add_extra(session_id=session.id, product_id=soda.id)

        assert extra.quantity == 2
        assert session.extras.count() == 1

    def test_price_change_starts_new_line(self, session, soda):
        add_extra(session_id=session.id, product_id=soda.id)
        soda.price = Decimal('22.00')
        soda.save()
        add_extra(session_id=session.id, product_id=soda.id)

        assert session.extras.count() == 2

    def test_cafeteria_product_rejected(self, session, espresso):
        with pytest.raises(InvalidExtraProductError):
            add_extra(session_id=session.id, product_id=espresso.id)

    def test_unknown_product(self, session):
        with pytest.raises(ProductNotFoundError):
            add_extra(session_id=session.id, product_id=uuid4())

    def test_unknown_session(self, soda):
        with pytest.raises(SessionNotFoundError):
            add_extra(session_id=uuid4(), product_id=soda.id)

    def test_decrement_extra(self, session, soda):
        extra = add_extra(session_id=session.id, product_id=soda.id, quantity=3)

        remaining = remove_extra(session_id=session.id, extra_id=extra.id, quantity=1)

        assert remaining.quantity == 2

    def test_remove_whole_line(self, session, soda):
        extra = add_extra(session_id=session.id, product_id=soda.id, quantity=3)

        assert remove_extra(session_id=session.id, extra_id=extra.id) is None
        assert not ConsumedExtra.objects.filter(id=extra.id).exists()

    def test_decrement_to_zero_removes(self, session, soda):
        extra = add_extra(session_id=session.id, product_id=soda.id, quantity=2)

        assert remove_extra(session_id=session.id, extra_id=extra.id, quantity=2) is None

    def test_remove_extra_of_other_session(self, session, soda):
        other = start_session(client_name='Beto', now=START)
        extra = add_extra(session_id=other.id, product_id=soda.id)

        with pytest.raises(ExtraNotFoundError):
            remove_extra(session_id=session.id, extra_id=extra.id)


@pytest.mark.django_db
class TestFinishSession:

    def test_short_stay(self, session):
        finished = finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CASH,
            now=START + timedelta(minutes=45),
        )

        assert finished.status == CoworkingStatus.FINISHED
        assert finished.total == Decimal('58.00')
        assert finished.end_time == START + timedelta(minutes=45)

    def test_stay_with_extras_records_order(self, session, soda, member):
        add_extra(session_id=session.id, product_id=soda.id, quantity=2)

        finished = finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CARD,
            finished_by=member,
            now=START + timedelta(minutes=61),
        )

        assert finished.total == Decimal('133.00')
        order = finished.order
        assert order.service_type == ServiceType.COWORKING
        assert order.payment_method == PaymentMethod.CARD
        assert order.total == Decimal('133.00')
        assert order.client_name == 'Ana'
        assert order.date == START + timedelta(minutes=61)
        lines = {item.product_name: item for item in order.items.all()}
        assert lines['Soda'].quantity == 2
        assert lines['Coworking: Ana (61 min)'].price == Decimal('93.00')

    def test_ninety_one_minutes(self, session):
        finished = finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CASH,
            now=START + timedelta(minutes=91),
        )

        assert finished.total == Decimal('128.00')

    def test_cash_payment_counts_as_cash_sale(self, session):
        finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CASH,
            now=START + timedelta(minutes=30),
        )

        assert sales_totals(start=START)['cash_sales'] == Decimal('58.00')

    def test_finish_twice_rejected(self, session):
        finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CASH,
            now=START + timedelta(minutes=45),
        )

        with pytest.raises(SessionAlreadyFinishedError):
            finish_session(
                session_id=session.id,
                payment_method=PaymentMethod.CASH,
                now=START + timedelta(minutes=90),
            )

        session.refresh_from_db()
        assert session.total == Decimal('58.00')

    def test_finished_session_is_read_only(self, session, soda):
        extra = add_extra(session_id=session.id, product_id=soda.id)
        finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CASH,
            now=START + timedelta(minutes=45),
        )

        with pytest.raises(SessionAlreadyFinishedError):
            add_extra(session_id=session.id, product_id=soda.id)
        with pytest.raises(SessionAlreadyFinishedError):
            remove_extra(session_id=session.id, extra_id=extra.id)


@pytest.mark.django_db
class TestEstimate:

    def test_running_bill(self, session, sandwich):
        add_extra(session_id=session.id, product_id=sandwich.id)

        bill = estimate_bill(session_id=session.id, now=START + timedelta(minutes=100))

        assert bill['minutes'] == 100
        assert bill['time_cost'] == Decimal('128.00')
        assert bill['total'] == Decimal('193.00')

    def test_finished_session_billed_to_end_time(self, session):
        finish_session(
            session_id=session.id,
            payment_method=PaymentMethod.CASH,
            now=START + timedelta(minutes=45),
        )

        bill = estimate_bill(session_id=session.id, now=START + timedelta(hours=5))

        assert bill['total'] == Decimal('58.00')

    def test_bill_carries_configured_currency(self, session, settings):
        settings.CURRENCY = 'USD'

        bill = estimate_bill(session_id=session.id, now=START + timedelta(minutes=30))

        assert bill['currency'] == 'USD'
