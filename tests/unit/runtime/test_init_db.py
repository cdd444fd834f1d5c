"""Schema creation and demo catalogue seeding."""

from sqlalchemy import inspect
from sqlmodel import Session

from src.storefront.core.services import DbSessionService
from src.storefront.entities import CategoryRepository, ProductRepository
from src.storefront.runtime.init_db import DEMO_CATALOGUE, init_db, seed_catalogue


def test_init_db_creates_schema(test_config):
    db_service = DbSessionService(test_config)

    init_db(db_service)

    assert "product" in inspect(db_service.engine).get_table_names()


def test_init_db_drop_recreates_empty_schema(db_service: DbSessionService, session: Session):
    seed_catalogue(session)
    session.close()

    init_db(db_service, drop=True)

    with db_service.get_session() as fresh:
        assert CategoryRepository(fresh).list_all() == []


def test_seed_catalogue(session: Session):
    expected = sum(len(items) for items in DEMO_CATALOGUE.values())

    assert seed_catalogue(session) == expected

    categories = CategoryRepository(session).list_all()
    assert [category.name for category in categories] == list(DEMO_CATALOGUE)
    oxford = ProductRepository(session).list_by_category(categories[0].id)[0]
    assert oxford.url_name == "oxford_shirt"
    assert [size.name for size in oxford.sizes] == ["S", "M", "L"]


def test_seed_is_skipped_when_populated(session: Session):
    seed_catalogue(session)
    assert seed_catalogue(session) == 0
