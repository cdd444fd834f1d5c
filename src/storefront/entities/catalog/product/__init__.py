"""Entity package: Product."""

from .entity import Product, ProductImage, url_name_for
from .repository import ProductMapper, ProductRepository
from .table import ProductImageTable, ProductTable

__all__ = [
    "Product",
    "ProductImage",
    "ProductImageTable",
    "ProductMapper",
    "ProductRepository",
    "ProductTable",
    "url_name_for",
]
