"""Entities organised by business concept.

Catalogue packages (product, category, image, size) contain:
- entity.py: Domain model mutated by the orchestrators
- table.py: Database persistence model
- repository.py: Mapper and data access layer

The remaining packages only carry table models; importing this package
registers every table with the SQLModel metadata.
"""

from .account import RoleTable, UserTable
from .catalog.category import Category, CategoryRepository, CategoryTable
from .catalog.image import Image, ImageTable
from .catalog.product import (
    Product,
    ProductImage,
    ProductImageTable,
    ProductRepository,
    ProductTable,
)
from .catalog.size import Size, SizeTable
from .commerce.basket import BasketItemTable, BasketTable
from .commerce.order import CardTable, CardTypeTable, OrderStatusTable, OrderTable
from .commerce.shipping import ContactTable, CountryTable, PostageTable, PostZoneTable
from .content import ContentTable, ContentTypeTable
from ._repository import NEW_ENTITY_ID, Repository

__all__ = [
    "NEW_ENTITY_ID",
    "Repository",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Image",
    "ImageTable",
    "Product",
    "ProductImage",
    "ProductImageTable",
    "ProductRepository",
    "ProductTable",
    "Size",
    "SizeTable",
    "BasketTable",
    "BasketItemTable",
    "CardTable",
    "CardTypeTable",
    "ContactTable",
    "ContentTable",
    "ContentTypeTable",
    "CountryTable",
    "OrderStatusTable",
    "OrderTable",
    "PostageTable",
    "PostZoneTable",
    "RoleTable",
    "UserTable",
]
