"""Database initialization and demo catalogue seeding."""

from decimal import Decimal

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.database.db_manage import DbManageService
from src.storefront.core.services.database.db_session import DbSessionService
from src.storefront.entities import (
    Category,
    CategoryRepository,
    Product,
    ProductRepository,
    Size,
)
from src.storefront.entities.catalog.product import url_name_for

DEMO_CATALOGUE: dict[str, list[tuple[str, str, str, list[str]]]] = {
    "Shirts": [
        ("Oxford Shirt", "Button-down cotton oxford.", "39.50", ["S", "M", "L"]),
        ("Linen Shirt", "Lightweight summer linen.", "45.00", ["M", "L"]),
    ],
    "Hats": [
        ("Wool Beanie", "Ribbed merino beanie.", "18.00", []),
    ],
}


def init_db(db_service: DbSessionService | None = None, drop: bool = False) -> None:
    """Create all database tables, dropping them first when ``drop`` is set."""
    db_service = db_service or DbSessionService()
    manage = DbManageService(db_service.engine)
    if drop:
        manage.drop_all()
    manage.create_all()


def seed_catalogue(session: Session) -> int:
    """Insert the demo catalogue into an empty database.

    Returns the number of products created; nothing is written when any
    category already exists.
    """
    categories = CategoryRepository(session)
    if categories.list_all():
        logger.info("Catalogue already populated, skipping seed")
        return 0

    created = {
        name: Category(name=name, position=index)
        for index, name in enumerate(DEMO_CATALOGUE, start=1)
    }
    for category in created.values():
        categories.insert_on_submit(category)
    categories.submit_changes()

    products = ProductRepository(session)
    count = 0
    for category_name, items in DEMO_CATALOGUE.items():
        for position, (name, description, price, sizes) in enumerate(items, start=1):
            products.insert_on_submit(
                Product(
                    category_id=created[category_name].id,
                    name=name,
                    description=description,
                    price=Decimal(price),
                    position=position,
                    url_name=url_name_for(name),
                    sizes=[Size(name=size) for size in sizes],
                )
            )
            count += 1
    products.submit_changes()
    logger.info("Seeded {} categories and {} products", len(created), count)
    return count


if __name__ == "__main__":
    init_db()
