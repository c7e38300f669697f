"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    pass


class ProductNotFoundError(CatalogServiceError):
    """Raised when a product does not exist."""
    pass
