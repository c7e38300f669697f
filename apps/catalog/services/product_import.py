"""Bulk product import service."""

import logging
from typing import Iterable

from django.db import transaction

from apps.catalog.models import Product

logger = logging.getLogger(__name__)


@transaction.atomic
def import_products(*, rows: Iterable[dict]) -> dict:
    """
    Upsert products by name.

    A row whose name matches an existing product (case-insensitive) updates
    that product with the row's fields; any other row creates a new product.
    Rows are expected to be validated already (see ProductImportRowSerializer).

    Args:
        rows: Iterable of product field dicts, each with at least ``name``

    Returns:
        Dictionary with ``created`` and ``updated`` counts
    """
    created = updated = 0
    existing = {p.name.lower(): p for p in Product.objects.select_for_update()}

    for row in rows:
        key = row['name'].lower()
        product = existing.get(key)
        if product is None:
            product = Product.objects.create(**row)
            existing[key] = product
            created += 1
        else:
            for field, value in row.items():
                if field != 'name':
                    setattr(product, field, value)
            product.save()
            updated += 1

    logger.info("Product import: %d created, %d updated", created, updated)
    return {'created': created, 'updated': updated}
