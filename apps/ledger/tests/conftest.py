import pytest
from datetime import date
from decimal import Decimal
from apps.ledger.models import TransactionCategory, Transaction, Budget, EntryType


@pytest.fixture
def salary_category(db):
    """Income category."""
    return TransactionCategory.objects.create(name='Salary', type=EntryType.INCOME, icon='💼')


@pytest.fixture
def groceries_category(db):
    """Expense category with a budget in most tests."""
    return TransactionCategory.objects.create(name='Groceries', type=EntryType.EXPENSE, icon='🛒')


@pytest.fixture
def transport_category(db):
    """Expense category without a budget."""
    return TransactionCategory.objects.create(name='Transport', type=EntryType.EXPENSE, icon='🚌')


@pytest.fixture
def groceries_budget(db, groceries_category):
    """400.00 monthly groceries budget."""
    return Budget.objects.create(category=groceries_category, amount=Decimal('400.00'))


@pytest.fixture
def march_entries(db, member, salary_category, groceries_category, transport_category):
    """A month of household entries (March 2026) plus one entry in April."""
    entries = [
        (date(2026, 3, 1), 'March salary', Decimal('2500.00'), EntryType.INCOME, salary_category),
        (date(2026, 3, 5), 'Supermarket', Decimal('180.50'), EntryType.EXPENSE, groceries_category),
        (date(2026, 3, 19), 'Market', Decimal('150.00'), EntryType.EXPENSE, groceries_category),
        (date(2026, 3, 31), 'Bus pass', Decimal('45.00'), EntryType.EXPENSE, transport_category),
        (date(2026, 4, 1), 'April groceries', Decimal('99.00'), EntryType.EXPENSE, groceries_category),
    ]
    return [
        Transaction.objects.create(
            member=member,
            date=entry_date,
            description=description,
            amount=amount,
            type=entry_type,
            category=category,
        )
        for entry_date, description, amount, entry_type, category in entries
    ]
