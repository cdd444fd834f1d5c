"""Size database table model."""

from sqlmodel import Field, SQLModel


class SizeTable(SQLModel, table=True):
    """Database persistence model for product sizes."""

    __tablename__ = "size"

    id: int | None = Field(default=None, primary_key=True)
    product_id: int | None = Field(
        default=None, foreign_key="product.id", nullable=False, index=True
    )
    name: str = Field(max_length=50)
    is_in_stock: bool = True
    is_active: bool = True
