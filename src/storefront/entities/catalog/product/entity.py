"""Entity: Product."""

import re
from decimal import Decimal

from pydantic import BaseModel, Field

from src.storefront.entities.catalog.image import Image
from src.storefront.entities.catalog.size import Size

_NON_URL_CHARS = re.compile(r"[^a-z0-9]+")


def url_name_for(name: str) -> str:
    """URL slug for a product name: lower case, runs of other characters become ``_``."""
    return _NON_URL_CHARS.sub("_", name.strip().lower()).strip("_")


class ProductImage(BaseModel):
    """Placement of an image in a product's gallery."""

    id: int = Field(default=0, description="Identity, 0 until persisted")
    image: Image
    position: int = Field(default=0, description="Display position in the gallery")


class Product(BaseModel):
    """Product entity representing an item for sale in a category.

    A product owns its gallery (``product_images``) and its ``sizes``; both
    are persisted together with the product.
    """

    id: int = Field(default=0, description="Identity, 0 until persisted")
    category_id: int = Field(default=0, description="Owning category")
    name: str = Field(default="", description="Unique product name")
    description: str = Field(default="")
    price: Decimal = Field(default=Decimal("0"))
    position: int = Field(default=0, description="Display position within the category")
    weight: int = Field(default=0, description="Shipping weight in grams")
    is_active: bool = Field(default=True)
    url_name: str = Field(default="", description="URL slug")
    product_images: list[ProductImage] = Field(default_factory=list)
    sizes: list[Size] = Field(default_factory=list)

    def add_image(self, image: Image) -> ProductImage:
        """Append an image after the current last gallery position."""
        position = max((pi.position for pi in self.product_images), default=0) + 1
        product_image = ProductImage(image=image, position=position)
        self.product_images.append(product_image)
        return product_image

    def find_size(self, name: str) -> Size | None:
        for size in self.sizes:
            if size.name == name:
                return size
        return None

    @property
    def active_sizes(self) -> list[Size]:
        return [size for size in self.sizes if size.is_active]
