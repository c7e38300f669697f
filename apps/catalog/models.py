# ==========================================
# apps/catalog/models.py
# ==========================================

from decimal import Decimal
import uuid

from django.core.validators import MinValueValidator
from django.db import models


class ProductCategory(models.TextChoices):
    CAFETERIA = 'cafeteria', 'Cafeteria'
    FRIDGE = 'fridge', 'Fridge'
    FOOD = 'food', 'Food'


# Categories that can be consumed as extras during a coworking session
EXTRA_CATEGORIES = (ProductCategory.FRIDGE, ProductCategory.FOOD)


class Product(models.Model):
    """Item sold at the point of sale."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    stock = models.PositiveIntegerField(default=0)
    description = models.TextField(blank=True)
    image_url = models.URLField(blank=True, max_length=500)
    category = models.CharField(
        max_length=20,
        choices=ProductCategory.choices,
        default=ProductCategory.CAFETERIA
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['category', 'name'], name='products_categor_5d2e8b_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def margin(self):
        return self.price - self.cost

    @property
    def is_extra(self):
        return self.category in EXTRA_CATEGORIES
