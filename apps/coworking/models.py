# ==========================================
# apps/coworking/models.py
# ==========================================

from decimal import Decimal
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class CoworkingStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    FINISHED = 'finished', 'Finished'


class CoworkingSession(models.Model):
    """
    A client's timed stay in the coworking area.

    While active, extras can be added or removed. Finishing fixes the end
    time and total and records the sale as an order.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    client_name = models.CharField(max_length=200)
    start_time = models.DateTimeField(default=timezone.now)
    end_time = models.DateTimeField(null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=CoworkingStatus.choices,
        default=CoworkingStatus.ACTIVE
    )
    total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    order = models.OneToOneField(
        'sales.Order',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='coworking_session'
    )
    started_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='coworking_sessions'
    )

    class Meta:
        db_table = 'coworking_sessions'
        indexes = [
            models.Index(fields=['status', 'start_time'], name='coworking_status_3a9f1e_idx'),
        ]
        ordering = ['start_time']

    def __str__(self):
        return f"{self.client_name} ({self.status})"

    @property
    def is_active(self):
        return self.status == CoworkingStatus.ACTIVE


class ConsumedExtra(models.Model):
    """Product consumed during a session, priced when it was added."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        CoworkingSession,
        on_delete=models.CASCADE,
        related_name='extras'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='consumed_extras'
    )
    product_name = models.CharField(max_length=200)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'coworking_extras'
        ordering = ['added_at']

    def __str__(self):
        return f"{self.quantity} x {self.product_name}"

    @property
    def subtotal(self):
        return self.unit_price * self.quantity
