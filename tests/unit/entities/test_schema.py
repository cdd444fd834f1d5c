"""Schema shape and store-enforced constraints."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.storefront.core.services import DbSessionService
from src.storefront.entities import (
    ContentTable,
    ContentTypeTable,
    ProductImageTable,
    RoleTable,
    UserTable,
)

EXPECTED_TABLES = {
    "product",
    "category",
    "image",
    "product_image",
    "size",
    "basket",
    "basket_item",
    "order",
    "order_status",
    "card",
    "card_type",
    "contact",
    "country",
    "content",
    "content_type",
    "user",
    "role",
    "postage",
    "post_zone",
}


def unique_constraints(db_service: DbSessionService, table: str) -> set[str]:
    return {uc["name"] for uc in inspect(db_service.engine).get_unique_constraints(table)}


def test_all_tables_are_created(db_service: DbSessionService):
    assert EXPECTED_TABLES <= set(inspect(db_service.engine).get_table_names())


@pytest.mark.parametrize(
    "table, constraint",
    [
        ("product", "product_name_unique"),
        ("category", "category_name_unique"),
        ("content", "unique_name"),
        ("content", "unique_urlName"),
        ("user", "user_email_unique"),
        ("product_image", "productImage_productId_imageId_unique"),
    ],
)
def test_named_unique_constraints(db_service: DbSessionService, table: str, constraint: str):
    assert constraint in unique_constraints(db_service, table)


def test_product_foreign_keys(db_service: DbSessionService):
    foreign_keys = inspect(db_service.engine).get_foreign_keys("product")
    assert [fk["referred_table"] for fk in foreign_keys] == ["category"]


def test_duplicate_user_email(session: Session):
    session.add(RoleTable(id=1, name="Administrator"))
    session.commit()
    session.add(UserTable(email="admin@example.com", password="x", role_id=1))
    session.commit()

    session.add(UserTable(email="admin@example.com", password="y", role_id=1))
    with pytest.raises(IntegrityError):
        session.commit()


def test_duplicate_content_url_name(session: Session):
    session.add(ContentTypeTable(id=1, name="Text"))
    session.commit()
    session.add(ContentTable(content_type_id=1, name="Home", url_name="home"))
    session.commit()

    session.add(ContentTable(content_type_id=1, name="Home page", url_name="home"))
    with pytest.raises(IntegrityError):
        session.commit()


def test_product_image_requires_existing_rows(session: Session):
    session.add(ProductImageTable(product_id=1, image_id=1))
    with pytest.raises(IntegrityError):
        session.commit()
