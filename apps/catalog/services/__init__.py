"""Services for catalog business logic."""

from django.db.models import QuerySet

from apps.catalog.models import Product, EXTRA_CATEGORIES

from .exceptions import CatalogServiceError, ProductNotFoundError
from .product_import import import_products


def get_product_by_id(*, product_id) -> Product:
    """
    Retrieve a product by ID.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product with ID {product_id} not found")


def get_extra_products() -> QuerySet[Product]:
    """Products that can be added to a coworking session."""
    return Product.objects.filter(category__in=EXTRA_CATEGORIES)


__all__ = [
    # Exceptions
    'CatalogServiceError',
    'ProductNotFoundError',
    # Services
    'get_product_by_id',
    'get_extra_products',
    'import_products',
]
