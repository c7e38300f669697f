from decimal import Decimal
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class ExpenseCategory(models.TextChoices):
    ELECTRICITY = 'electricity', 'Electricity'
    INTERNET = 'internet', 'Internet'
    SALARIES = 'salaries', 'Salaries'
    INVENTORY = 'inventory', 'Inventory'
    OTHER = 'other', 'Other'


class ExpenseType(models.TextChoices):
    RECURRING = 'recurring', 'Recurring'
    UNEXPECTED = 'unexpected', 'Unexpected'


class Expense(models.Model):
    """Business expense paid out of the register or the bank."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    category = models.CharField(
        max_length=20,
        choices=ExpenseCategory.choices,
        default=ExpenseCategory.OTHER
    )
    type = models.CharField(
        max_length=20,
        choices=ExpenseType.choices,
        default=ExpenseType.UNEXPECTED
    )
    recorded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['category', 'date'], name='expenses_categor_8c3d2a_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"{self.description} ({self.amount})"
