# ==========================================
# apps/sales/models.py
# ==========================================

from decimal import Decimal
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class ServiceType(models.TextChoices):
    TABLE = 'table', 'Table'
    TAKEAWAY = 'takeaway', 'Takeaway'
    COWORKING = 'coworking', 'Coworking'


class PaymentMethod(models.TextChoices):
    CASH = 'cash', 'Cash'
    CARD = 'card', 'Card'


class Order(models.Model):
    """Completed point-of-sale order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    client_name = models.CharField(max_length=200, blank=True)
    service_type = models.CharField(max_length=20, choices=ServiceType.choices)
    payment_method = models.CharField(max_length=10, choices=PaymentMethod.choices)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'orders'
        indexes = [
            models.Index(fields=['payment_method', 'date'], name='orders_payment_4f1a7c_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"Order {self.id} ({self.total})"


class OrderItem(models.Model):
    """
    Order line.

    Name and price are captured at checkout so later catalog edits or
    deletions never change past orders.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order_items'
    )
    product_name = models.CharField(max_length=200)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = 'order_items'
        ordering = ['product_name']

    def __str__(self):
        return f"{self.quantity} x {self.product_name}"

    @property
    def subtotal(self):
        return self.price * self.quantity
