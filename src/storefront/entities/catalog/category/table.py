"""Category database table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from src.storefront.entities.catalog.product.table import ProductTable


class CategoryTable(SQLModel, table=True):
    """Database persistence model for categories.

    ``products`` is read-only here; products are written through their own
    repository.
    """

    __tablename__ = "category"
    __table_args__ = (UniqueConstraint("name", name="category_name_unique"),)

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    parent_id: int | None = Field(default=None, foreign_key="category.id")
    position: int = 0
    is_active: bool = True

    products: list[ProductTable] = Relationship(
        sa_relationship_kwargs={
            "order_by": lambda: [ProductTable.position, ProductTable.id],
            "viewonly": True,
        }
    )
