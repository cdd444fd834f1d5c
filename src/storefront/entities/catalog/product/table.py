"""Product database table models."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from src.storefront.entities.catalog.image.table import ImageTable
from src.storefront.entities.catalog.size.table import SizeTable


class ProductImageTable(SQLModel, table=True):
    """Link between a product and one of its gallery images."""

    __tablename__ = "product_image"
    __table_args__ = (
        UniqueConstraint(
            "product_id", "image_id", name="productImage_productId_imageId_unique"
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    product_id: int | None = Field(
        default=None, foreign_key="product.id", nullable=False, index=True
    )
    image_id: int | None = Field(default=None, foreign_key="image.id", nullable=False)
    position: int = 0

    image: Optional[ImageTable] = Relationship()


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    Gallery links and sizes are owned by the product row and saved or
    deleted together with it.
    """

    __tablename__ = "product"
    __table_args__ = (UniqueConstraint("name", name="product_name_unique"),)

    id: int | None = Field(default=None, primary_key=True)
    category_id: int = Field(foreign_key="category.id", index=True)
    name: str = Field(max_length=250)
    description: str = Field(default="", sa_type=Text)
    price: Decimal = Field(default=Decimal("0"), max_digits=19, decimal_places=4)
    position: int = 0
    weight: int = 0
    is_active: bool = True
    url_name: str = Field(default="", max_length=250)

    images: list[ProductImageTable] = Relationship(
        sa_relationship_kwargs={
            "order_by": "ProductImageTable.position",
            "cascade": "all, delete-orphan",
        }
    )
    sizes: list[SizeTable] = Relationship(
        sa_relationship_kwargs={
            "order_by": "SizeTable.id",
            "cascade": "all, delete-orphan",
        }
    )
