"""Entity: Category."""

from pydantic import BaseModel, Field

from src.storefront.entities.catalog.product import Product


class Category(BaseModel):
    """A node of the catalogue tree; owns the products listed under it."""

    id: int = Field(default=0, description="Identity, 0 until persisted")
    name: str = Field(default="", description="Unique category name")
    parent_id: int | None = Field(default=None, description="Parent category, None at the root")
    position: int = Field(default=0, description="Display position among its siblings")
    is_active: bool = Field(default=True)
    products: list[Product] = Field(default_factory=list)
