from __future__ import annotations

from decimal import Decimal

import pytest
from sqlmodel import Session

from src.storefront.entities import (
    Category,
    CategoryRepository,
    Image,
    Product,
    ProductRepository,
    Size,
)


@pytest.fixture
def catalogue(session: Session) -> dict[str, Category | Product]:
    """Two categories; three ordered products in the first, one in the second."""
    categories = CategoryRepository(session)
    shirts = Category(name="Shirts", position=1)
    hats = Category(name="Hats", position=2)
    categories.insert_on_submit(shirts)
    categories.insert_on_submit(hats)
    categories.submit_changes()

    products = ProductRepository(session)
    oxford = Product(
        category_id=shirts.id,
        name="Oxford",
        description="Cotton oxford",
        price=Decimal("39.50"),
        position=1,
        sizes=[Size(name="S"), Size(name="M")],
    )
    oxford.add_image(Image(file_name="oxford.jpg", description="front"))
    linen = Product(category_id=shirts.id, name="Linen", position=2)
    flannel = Product(category_id=shirts.id, name="Flannel", position=3)
    beanie = Product(category_id=hats.id, name="Beanie", position=1)
    for product in (oxford, linen, flannel, beanie):
        products.insert_on_submit(product)
    products.submit_changes()

    # later repositories must read rows back from the store
    session.expunge_all()
    session.info.clear()
    return {
        "shirts": shirts,
        "hats": hats,
        "oxford": oxford,
        "linen": linen,
        "flannel": flannel,
        "beanie": beanie,
    }
