# ==========================================
# apps/ledger/models.py
# ==========================================

from decimal import Decimal
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class EntryType(models.TextChoices):
    INCOME = 'income', 'Income'
    EXPENSE = 'expense', 'Expense'


class TransactionCategory(models.Model):
    """Category used to group household income and expenses."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    type = models.CharField(max_length=10, choices=EntryType.choices)
    icon = models.CharField(max_length=10, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'transaction_categories'
        ordering = ['type', 'name']

    def __str__(self):
        return f"{self.icon} {self.name}".strip()


class Transaction(models.Model):
    """Single income or expense entry recorded by a member."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField()
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    type = models.CharField(max_length=10, choices=EntryType.choices)
    category = models.ForeignKey(
        TransactionCategory,
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    member = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='transactions'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['date', 'type'], name='transaction_date_7e1f2a_idx'),
            models.Index(fields=['category', 'date'], name='transaction_categor_3c9d41_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.date} {self.description} ({self.amount})"


class Budget(models.Model):
    """Monthly spending limit for an expense category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.OneToOneField(
        TransactionCategory,
        on_delete=models.PROTECT,
        related_name='budget'
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'budgets'
        ordering = ['category__name']

    def __str__(self):
        return f"{self.category.name}: {self.amount}"
