"""Product workflows against real repositories and an in-memory database."""

from decimal import Decimal
from pathlib import Path

import pytest
from sqlmodel import Session

from src.storefront.core.errors import ValidationError
from src.storefront.core.models import UploadedFile
from src.storefront.core.services import (
    ImageUploadService,
    OrderableService,
    ProductOrchestrator,
    SizeService,
)
from src.storefront.entities import CategoryRepository, ProductRepository, ProductTable
from tests.fixtures.core import form_context


@pytest.fixture
def orchestrator(session: Session, tmp_path: Path) -> ProductOrchestrator:
    return ProductOrchestrator(
        ProductRepository(session),
        CategoryRepository(session),
        ImageUploadService(upload_dir=tmp_path, allowed_extensions=[".jpg"]),
        SizeService(),
        OrderableService(),
    )


def test_create_then_edit_round_trip(orchestrator, session: Session, catalogue):
    hats = catalogue["hats"]
    created = orchestrator.update(
        form_context(
            {
                "categoryid": str(hats.id),
                "name": "Bucket Hat",
                "price": "15.00",
                "size_0": "One size",
            },
            files=[UploadedFile("bucket.jpg", b"jpeg")],
        ),
        0,
    ).view_data.product

    assert created.id > 0
    assert created.product_images[0].image.id > 0

    fetched = orchestrator.edit_form(form_context({}), created.id).view_data.product
    assert fetched is created

    session.expunge_all()
    row = session.get(ProductTable, created.id)
    assert row.name == "Bucket Hat"
    assert row.price == Decimal("15.00")
    assert row.url_name == "bucket_hat"
    assert [size.name for size in row.sizes] == ["One size"]
    assert row.images[0].image.description == "bucket.jpg"


def test_failed_update_persists_nothing(orchestrator, session: Session, catalogue):
    oxford = catalogue["oxford"]

    with pytest.raises(ValidationError):
        orchestrator.update(form_context({"name": "Linen"}), oxford.id)

    session.expunge_all()
    assert session.get(ProductTable, oxford.id).name == "Oxford"


def test_move_down_persists_positions(orchestrator, session: Session, catalogue):
    orchestrator.move_down(form_context({}), catalogue["oxford"].id)

    session.expunge_all()
    positions = {
        name: session.get(ProductTable, catalogue[name].id).position
        for name in ("oxford", "linen", "flannel")
    }
    assert positions == {"oxford": 2, "linen": 1, "flannel": 3}


def test_rejected_create_leaves_no_stored_files(
    orchestrator, session: Session, catalogue, tmp_path: Path
):
    with pytest.raises(ValidationError):
        orchestrator.update(
            form_context(
                {"categoryid": str(catalogue["hats"].id), "name": "Oxford"},
                files=[UploadedFile("a.jpg", b"jpeg")],
            ),
            0,
        )

    assert list(tmp_path.iterdir()) == []
