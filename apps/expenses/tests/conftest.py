import pytest
from datetime import datetime, timezone
from decimal import Decimal
from apps.expenses.models import Expense, ExpenseCategory, ExpenseType


@pytest.fixture
def march_expenses(db):
    return [
        Expense.objects.create(
            date=datetime(2026, 3, 5, 8, 0, tzinfo=timezone.utc),
            description='Milk',
            amount=Decimal('120.00'),
            category=ExpenseCategory.INVENTORY,
        ),
        Expense.objects.create(
            date=datetime(2026, 3, 5, 20, 0, tzinfo=timezone.utc),
            description='Internet March',
            amount=Decimal('499.00'),
            category=ExpenseCategory.INTERNET,
            type=ExpenseType.RECURRING,
        ),
        Expense.objects.create(
            date=datetime(2026, 3, 9, 10, 0, tzinfo=timezone.utc),
            description='Light bulb',
            amount=Decimal('35.50'),
            category=ExpenseCategory.OTHER,
        ),
    ]
